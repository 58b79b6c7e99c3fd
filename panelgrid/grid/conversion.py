"""
Pixel/Grid Coordinate Conversion

Pure helpers translating pixel measurements from the host UI into grid units
and back. A grid cell is base_size pixels wide and cells are separated by gap
pixels, so the pitch between cell origins is (base_size + gap).

Negative pixel inputs are clamped, never rejected.
"""

import math
from typing import Optional


def pixels_to_grid_size(pixels: float, base_size: float, gap: float,
                        column_count: Optional[int] = None,
                        x_position: Optional[int] = None) -> int:
    """
    Convert a pixel length to a whole number of cells (rounded up).

    Args:
        pixels: Length in pixels
        base_size: Cell size in pixels
        gap: Gap between cells in pixels
        column_count: Optional grid width used to cap the result
        x_position: Optional starting column; with column_count, caps the
                    result so x_position + size <= column_count

    Returns:
        Size in cells, never below 1
    """
    size = max(1, math.ceil(pixels / (base_size + gap)))

    if column_count is not None and x_position is not None:
        size = max(1, min(size, column_count - x_position))
    elif column_count is not None:
        size = max(1, min(size, column_count))

    return size


def pixels_to_grid_position(pixels: float, base_size: float, gap: float,
                            column_count: Optional[int] = None,
                            width: Optional[int] = None) -> int:
    """
    Convert a pixel coordinate to a cell coordinate (rounded down).

    Args:
        pixels: Coordinate in pixels
        base_size: Cell size in pixels
        gap: Gap between cells in pixels
        column_count: Optional grid width used to cap the result
        width: Optional panel width; with column_count, keeps the whole
               panel inside the grid

    Returns:
        Cell coordinate, never below 0
    """
    position = max(0, math.floor(pixels / (base_size + gap)))

    if column_count is not None and width is not None:
        position = max(0, min(position, column_count - width))
    elif column_count is not None:
        position = max(0, min(position, column_count - 1))

    return position


def grid_to_pixels(units: int, base_size: float, gap: float) -> float:
    """
    Convert a cell count to a pixel length.

    Gaps sit between cells only, so there is no trailing gap:
    units * base_size + max(0, units - 1) * gap
    """
    return units * base_size + max(0, units - 1) * gap


def grid_position_to_pixels(coord: int, base_size: float, gap: float) -> float:
    """Convert a cell coordinate to the pixel offset of that cell's origin."""
    return max(0, coord * (base_size + gap))


def snap_to_grid(pixels: float, base_size: float, gap: float) -> float:
    """Snap a pixel coordinate to the origin of the cell containing it."""
    position = pixels_to_grid_position(pixels, base_size, gap)
    return grid_position_to_pixels(position, base_size, gap)
