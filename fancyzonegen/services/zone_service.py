"""Zone Service - Computes the fixed zone grid for a reference canvas."""

import math

from fancyzonegen.schemas.layout import ColumnSpec, RowSpec, Zone

# Column split locations as fractions of the reference width
SPLIT_PERCENTAGES = (0.3, 0.5, 0.7)


def split_points(ref_width: int) -> list[int]:
    """Column locations in pixels, truncated toward zero."""
    return [int(pct * ref_width) for pct in SPLIT_PERCENTAGES]


def describe_splits(ref_width: int) -> str:
    # Midpoints round away from zero
    a, b, c = (math.floor(pct * ref_width + 0.5) for pct in SPLIT_PERCENTAGES)
    return f"Splitting at 30% ({a}px), 50% ({b}px) and 70%({c}px)"


def column_specs(ref_width: int) -> list[ColumnSpec]:
    """Full width first, then left and right of every split point."""
    columns = [ColumnSpec(X=0, width=ref_width)]
    for px in split_points(ref_width):
        columns.append(ColumnSpec(X=0, width=px))  # left
        columns.append(ColumnSpec(X=px, width=ref_width - px))  # right
    return columns


def row_specs(ref_height: int) -> list[RowSpec]:
    """Full height, top half, bottom half."""
    half_height = ref_height // 2
    return [
        RowSpec(Y=0, height=ref_height),
        RowSpec(Y=0, height=half_height),
        RowSpec(Y=half_height, height=half_height),
    ]


def compute_zones(ref_width: int, ref_height: int) -> list[Zone]:
    """Every column spec combined with every row spec (21 zones)."""
    rows = row_specs(ref_height)
    return [
        Zone(X=col.X, Y=row.Y, width=col.width, height=row.height)
        for col in column_specs(ref_width)
        for row in rows
    ]
