"""
mpl_stroke_utils.py
-------------------

Conversion of pen strokes into Matplotlib path objects.

Nothing here touches an Axes or a Figure: the functions build `Path` and
`PathPatch` objects which the caller adds to its own Axes
(``ax.add_patch(patch)``) or renders otherwise.

Core API:

    stroke_to_path(stroke, closed=False) -> mplPath
        One stroke as MOVETO + LINETO..., optionally closed with CLOSEPOLY.

    join_paths(paths, preserve_moveto=True) -> mplPath
        Concatenate paths into one compound (or continuous) path.

    strokes_to_path(strokes) -> mplPath
        All strokes as a single compound path, one subpath per stroke.

    strokes_to_patch(strokes, **style) -> PathPatch
        Unfilled patch wrapping strokes_to_path().
"""

from __future__ import annotations

__all__ = ["stroke_to_path", "join_paths", "strokes_to_path", "strokes_to_patch",]

from typing import Any, Iterable, List, Union

import numpy as np
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from .stroke import Stroke

StrokeLike = Union[Stroke, np.ndarray]


def _as_vertices(stroke: StrokeLike) -> np.ndarray:
    if isinstance(stroke, Stroke):
        return stroke.to_array()
    if isinstance(stroke, np.ndarray):
        verts = np.asarray(stroke, dtype=np.float64)
        if verts.ndim != 2 or verts.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) vertex array, got shape {verts.shape}.")
        return verts
    raise TypeError(f"Unsupported stroke type: {type(stroke).__name__}")


def stroke_to_path(stroke: StrokeLike, closed: bool = False) -> mplPath:
    """Convert one stroke into a polyline ``Path``.

    Args:
        stroke: A Stroke or an ``(n, 2)`` vertex array.
        closed: Append a CLOSEPOLY vertex so the renderer joins the ends.
            Pens always emit open strokes; closing is a rendering choice.

    Returns:
        matplotlib.path.Path

    Raises:
        ValueError: If the stroke has no points.
    """
    verts = _as_vertices(stroke)
    if len(verts) == 0:
        raise ValueError("Cannot build a path from an empty stroke.")

    codes = np.full(len(verts), mplPath.LINETO, dtype=mplPath.code_type)
    codes[0] = mplPath.MOVETO
    if closed:
        verts = np.vstack([verts, verts[:1]])
        codes = np.append(codes, mplPath.CLOSEPOLY).astype(mplPath.code_type)
    return mplPath(verts, codes)


def join_paths(
        paths           : List[mplPath],
        preserve_moveto : bool           = True,
    ) -> mplPath:
    """Join multiple Matplotlib ``Path`` objects into a single composite path.

    Args:
        paths (list[matplotlib.path.Path]):
            Input list of path objects to join.
        preserve_moveto (bool, optional):
            Keep the initial ``MOVETO`` of each path (default), producing
            disjoint subpaths. If ``False``, subsequent paths continue the
            previous one.

    Returns:
        matplotlib.path.Path:
            The concatenated composite path.

    Raises:
        ValueError: If ``paths`` is empty.
        TypeError: If any element of ``paths`` is not a ``Path`` instance.
    """
    if not paths:
        raise ValueError("Expected a non-empty list of Matplotlib paths.")

    for path in paths:
        if not isinstance(path, mplPath):
            raise TypeError(f"Expected a list of Matplotlib paths, got {type(path).__name__}.")

    verts_list, codes_list = [paths[0].vertices], [paths[0].codes]

    start = 0 if preserve_moveto else 1
    for path in paths[1:]:
        if path.vertices.size == 0:
            continue
        verts_list.append(path.vertices[start:])
        codes_list.append(path.codes[start:])

    return mplPath(np.concatenate(verts_list), np.concatenate(codes_list))


def strokes_to_path(strokes: Iterable[StrokeLike]) -> mplPath:
    """All non-empty strokes as one compound path."""
    paths = [stroke_to_path(s) for s in strokes if len(s) > 0]
    if not paths:
        raise ValueError("No non-empty strokes to convert.")
    return join_paths(paths, preserve_moveto=True)


def strokes_to_patch(strokes: Iterable[StrokeLike], **style: Any) -> PathPatch:
    """Unfilled ``PathPatch`` for the strokes; `style` goes to PathPatch."""
    style.setdefault("fill", False)
    return PathPatch(strokes_to_path(strokes), **style)
