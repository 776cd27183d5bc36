#!/usr/bin/env python3
"""
Boundary policy for bodies leaving the visible field.

Each axis is judged on its own against an extent of (field dimension + body radius),
so a body only counts as out once its edge has fully left. Two independent
switches drive the outcome: wrap remaps the coordinate, and kill (applied by the
engine) excludes bodies that have exited.

Wrap remapping is intentionally asymmetric:
- leaving through 0 maps d to max + d (the trailing edge);
- leaving through max maps d to max % d, a remainder rather than a modulo into range.
  As d > max > 0 this lands the body on the far edge, at max.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class BoundaryResult:
    """Remapped coordinates and whether either axis left the field."""
    x: float
    y: float
    exited: bool


def out_of_bounds(d: float, max_extent: float) -> int:
    """Return -1 below 0, +1 beyond max_extent, 0 inside."""
    if d < 0:
        return -1
    if d > max_extent:
        return 1
    return 0


def remap_coordinate(d: float, max_extent: float, sign: int, wrap: bool) -> float:
    if not wrap or sign == 0:
        return d
    if sign == -1:
        return max_extent + d
    return max_extent % d


def apply_boundary(x: float, y: float, width: float, height: float,
                   radius: float, wrap: bool) -> BoundaryResult:
    """
    Apply the boundary policy to a proposed position.

    Args:
        x, y: Proposed position in field pixels
        width, height: Field dimensions
        radius: Body radius, added to both extents
        wrap: Whether out-of-range coordinates are remapped

    Returns:
        BoundaryResult with the (possibly remapped) coordinates and the exit flag.
    """
    max_x = width + radius
    max_y = height + radius
    sign_x = out_of_bounds(x, max_x)
    sign_y = out_of_bounds(y, max_y)
    return BoundaryResult(
        x=remap_coordinate(x, max_x, sign_x, wrap),
        y=remap_coordinate(y, max_y, sign_y, wrap),
        exited=sign_x != 0 or sign_y != 0,
    )
