"""Layout schemas based on the FancyZones custom-layouts.json format."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Zone(BaseModel):
    """A rectangle in reference-canvas pixels."""

    X: int
    Y: int
    width: int
    height: int


class ColumnSpec(BaseModel):
    """Horizontal extent of a zone."""

    X: int
    width: int


class RowSpec(BaseModel):
    """Vertical extent of a zone."""

    Y: int
    height: int


class LayoutInfo(BaseModel):
    """The ``info`` object of a canvas layout."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ref_width: StrictInt = Field(..., alias="ref-width")
    ref_height: StrictInt = Field(..., alias="ref-height")


class LayoutEntry(BaseModel):
    """An element of ``custom-layouts`` (only the fields we read)."""

    model_config = ConfigDict(extra="allow")

    type: StrictStr
    name: StrictStr


class CanvasLayout(LayoutEntry):
    """A layout entry whose zones are free-form pixel rectangles."""

    type: Literal["canvas"]
    info: LayoutInfo
