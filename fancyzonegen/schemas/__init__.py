"""Pydantic schemas for layout entries and generated zones."""

from fancyzonegen.schemas.layout import (
    CanvasLayout,
    ColumnSpec,
    LayoutEntry,
    LayoutInfo,
    RowSpec,
    Zone,
)

__all__ = [
    "CanvasLayout",
    "ColumnSpec",
    "LayoutEntry",
    "LayoutInfo",
    "RowSpec",
    "Zone",
]
