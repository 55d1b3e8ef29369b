"""
shapes.py
---------

Scribbled shape synthesis on top of a Pen.

Every shape routine:
 1. validates its inputs (nothing is drawn when validation fails),
 2. relocates the pen to the shape's start point (one new stroke per call),
 3. reserves the stroke for the whole iteration budget,
 4. for i = 0 .. count-1 computes an ideal target T(i) on the shape and calls
    `pen.attract(*T(i))` followed by `pen.advance()`.

Composite shapes (rectangle, path) split their budget across sub-segments in
proportion to segment length, so the scribble density stays roughly uniform
whatever the segment sizes. Sub-segments are traced one after another without
relocating, so the shape remains a single stroke.

Core API:

    line(pen, x0, y0, x1, y1, count)
    circle(pen, xc, yc, radius, count)
    ellipse(pen, xc, yc, rx, ry, count)
    arc(pen, xc, yc, radius, start, end, count, ccw=False)
    rectangle(pen, x0, y0, w, h, count)
    path(pen, points, count, closed=False)
    dot(pen, x, y, count)

    allocate_counts(lengths, count) -> list[int]
    rectangle_counts(w, h, count)   -> list[int]   # top, right, bottom, left
    path_counts(points, count, closed=False) -> list[int]
"""

from __future__ import annotations

__all__ = [
    "EPSILON",
    "line", "circle", "ellipse", "arc", "rectangle", "path", "dot",
    "allocate_counts", "rectangle_counts", "path_counts",
]

import math
import logging
from numbers import Integral
from typing import List, Sequence, Union

import numpy as np

from .geometry import (
    TAU, Point, PointXY, as_finite, as_point, lerp, normalize_angle, segment_lengths,
)
from .logging_utils import LOGGER_NAME
from .pen import Pen

# Total lengths at or below this are unusable as allocation weights
EPSILON = 1e-9

logger = logging.getLogger(LOGGER_NAME)


# =============================================================================
# Validation helpers
# =============================================================================
def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise TypeError(f"Unsupported count type: {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return int(count)


def _check_radius(name: str, value: float) -> float:
    value = as_finite(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _check_pen(pen: Pen) -> None:
    if not isinstance(pen, Pen):
        raise TypeError(f"Unsupported pen type: {type(pen).__name__}")


# =============================================================================
# Allocation policy
# =============================================================================
def allocate_counts(lengths: Sequence[float], count: int) -> List[int]:
    """Split `count` iterations across segments in proportion to their length.

    Each segment gets ``round(count * d / L)`` where L is the total length.
    When L is zero or near zero (duplicate points, a 0x0 rectangle) the
    lengths carry no usable weight and the budget is split evenly instead.

    Rounding is per segment, so the sum may differ from `count` by a few
    iterations.

    Args:
        lengths: Non-negative segment lengths (sign is ignored).
        count: Total iteration budget.

    Returns:
        list[int]: One iteration count per segment.
    """
    count = _check_count(count)
    if not lengths:
        return []

    weights = [abs(as_finite("length", d)) for d in lengths]
    total = math.fsum(weights)
    if total <= EPSILON:
        logger.warning(
            f"Degenerate total length {total:g} over {len(weights)} segments; "
            f"splitting {count} iterations evenly."
        )
        share = int(round(count / len(weights)))
        return [share] * len(weights)

    return [int(round(count * w / total)) for w in weights]


def rectangle_counts(w: float, h: float, count: int) -> List[int]:
    """Per-side iteration counts for a rectangle, in order top, right, bottom, left."""
    w, h = abs(as_finite("w", w)), abs(as_finite("h", h))
    return allocate_counts([w, h, w, h], count)


def path_counts(points: Sequence[Union[Point, PointXY]], count: int,
                closed: bool = False) -> List[int]:
    """Per-segment iteration counts for a polyline (closing segment last)."""
    return allocate_counts(segment_lengths(points, closed), count)


# =============================================================================
# Internal tracing
# =============================================================================
def _trace_line(pen: Pen, p0: Point, p1: Point, count: int) -> None:
    """Steer the pen along p0 -> p1 for `count` steps without relocating."""
    if count <= 0:
        return
    countf = float(count)
    for i in range(count):
        t = i / countf
        pen.attract(lerp(t, p0.x, p1.x), lerp(t, p0.y, p1.y))
        pen.advance()


def _trace_ellipse(pen: Pen, xc: float, yc: float, rx: float, ry: float,
                   start: float, sweep: float, count: int) -> None:
    countf = float(count)
    for i in range(count):
        a = start + i / countf * sweep
        pen.attract(xc + math.cos(a) * rx, yc + math.sin(a) * ry)
        pen.advance()


# =============================================================================
# Shapes
# =============================================================================
def line(pen: Pen, x0: float, y0: float, x1: float, y1: float, count: int) -> None:
    """Scribble a line from (x0, y0) to (x1, y1)."""
    _check_pen(pen)
    p0, p1 = as_point((x0, y0)), as_point((x1, y1))
    count = _check_count(count)
    logger.debug(f"line {tuple(p0)} -> {tuple(p1)} count={count}")

    pen.relocate(p0.x, p0.y)
    pen.reserve(count)
    _trace_line(pen, p0, p1, count)


def _full_ellipse(pen: Pen, c: Point, rx: float, ry: float, count: int) -> None:
    pen.relocate(c.x + rx, c.y)
    pen.reserve(count)
    _trace_ellipse(pen, c.x, c.y, rx, ry, 0.0, TAU, count)


def circle(pen: Pen, xc: float, yc: float, radius: float, count: int) -> None:
    """Scribble a full circle, starting at its 0 degree point."""
    _check_pen(pen)
    c = as_point((xc, yc))
    radius = _check_radius("radius", radius)
    count = _check_count(count)
    logger.debug(f"circle center={tuple(c)} r={radius} count={count}")
    _full_ellipse(pen, c, radius, radius, count)


def ellipse(pen: Pen, xc: float, yc: float, rx: float, ry: float, count: int) -> None:
    """Scribble a full axis-aligned ellipse, starting at (xc + rx, yc)."""
    _check_pen(pen)
    c = as_point((xc, yc))
    rx, ry = _check_radius("rx", rx), _check_radius("ry", ry)
    count = _check_count(count)
    logger.debug(f"ellipse center={tuple(c)} radii=({rx}, {ry}) count={count}")
    _full_ellipse(pen, c, rx, ry, count)


def arc(pen: Pen, xc: float, yc: float, radius: float, start: float, end: float,
        count: int, ccw: bool = False) -> None:
    """Scribble a circular arc between two angles (radians).

    Both angles are normalized into [0, 2pi). The default direction follows
    increasing angle (clockwise on a y-down canvas); `ccw=True` follows
    decreasing angle. Equal angles give a zero sweep, which scribbles a
    cluster around the start point.
    """
    _check_pen(pen)
    c = as_point((xc, yc))
    radius = _check_radius("radius", radius)
    start = normalize_angle(as_finite("start", start))
    end = normalize_angle(as_finite("end", end))
    count = _check_count(count)

    sweep = normalize_angle(start - end) if ccw else normalize_angle(end - start)
    # angles equal up to rounding: zero sweep, not a full turn
    if sweep < EPSILON or TAU - sweep < EPSILON:
        sweep = 0.0
    if ccw:
        sweep = -sweep
    logger.debug(f"arc center={tuple(c)} r={radius} start={start:.4f} sweep={sweep:.4f} count={count}")

    pen.relocate(c.x + math.cos(start) * radius, c.y + math.sin(start) * radius)
    pen.reserve(count)
    _trace_ellipse(pen, c.x, c.y, radius, radius, start, sweep, count)


def rectangle(pen: Pen, x0: float, y0: float, w: float, h: float, count: int) -> None:
    """Scribble a rectangle as one stroke: top, right, bottom, then left back to (x0, y0)."""
    _check_pen(pen)
    origin = as_point((x0, y0))
    w, h = as_finite("w", w), as_finite("h", h)
    counts = rectangle_counts(w, h, count)
    logger.debug(f"rectangle origin={tuple(origin)} size=({w}, {h}) counts={counts}")

    corners = [
        origin,
        Point(origin.x + w, origin.y),
        Point(origin.x + w, origin.y + h),
        Point(origin.x, origin.y + h),
        origin,
    ]
    pen.relocate(origin.x, origin.y)
    pen.reserve(sum(counts))
    for p0, p1, n in zip(corners, corners[1:], counts):
        _trace_line(pen, p0, p1, n)


def path(pen: Pen, points: Sequence[Union[Point, PointXY]], count: int,
         closed: bool = False) -> None:
    """Scribble along a polyline.

    Each segment gets a share of `count` proportional to its length. With
    `closed`, the segment from the last point back to the first is included
    in both the allocation and the drawing.
    """
    _check_pen(pen)
    pts = [as_point(p) for p in points]
    if not pts:
        raise ValueError("Expected a non-empty list of points.")
    if not isinstance(closed, (bool, np.bool_)):
        raise TypeError(f"Unsupported closed type: {type(closed).__name__}")
    closed = bool(closed)
    counts = path_counts(pts, count, closed)
    logger.debug(f"path points={len(pts)} closed={closed} counts={counts}")

    ends = pts + [pts[0]] if closed and len(pts) > 1 else pts
    pen.relocate(pts[0].x, pts[0].y)
    pen.reserve(sum(counts))
    for p0, p1, n in zip(ends, ends[1:], counts):
        _trace_line(pen, p0, p1, n)


def dot(pen: Pen, x: float, y: float, count: int) -> None:
    """Scribble a tight jittery cluster around a fixed point."""
    _check_pen(pen)
    p = as_point((x, y))
    count = _check_count(count)
    logger.debug(f"dot {tuple(p)} count={count}")

    pen.relocate(p.x, p.y)
    pen.reserve(count)
    for _ in range(count):
        pen.attract(p.x, p.y)
        pen.advance()
