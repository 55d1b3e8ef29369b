"""
pen.py
------

Implements the Pen - a damped, randomly curling particle whose trail
forms scribbled strokes.

Responsibilities:
  - Hold simulation state (position, velocity, heading) and parameters
  - Integrate one step of motion (`advance`)
  - Steer toward target points (`attract`)
  - Collect output strokes; a new stroke starts on every `relocate`

The pen never draws on a rendering surface. Callers read `pen.strokes`
and hand them to a renderer (see `mpl_stroke_utils` for Matplotlib).
"""

from __future__ import annotations

__all__ = ["Pen", "CURL_MAX", "PULL_MAX",]

import math
import logging
from typing import List, Optional, Tuple

from .config import PenConfig
from .geometry import Point
from .logging_utils import LOGGER_NAME
from .rng import RNGBackend, get_rng
from .stroke import Stroke

# =============================================================================
# Constants
# =============================================================================
PUBLIC_SCALE = 100.0
CURL_MAX = math.pi   # internal curl at public value 100
PULL_MAX = 0.5       # internal pull at public value 100

logger = logging.getLogger(LOGGER_NAME)


class Pen:
    """
    Stateful scribbling pen.

    Each step the pen moves by its velocity, its heading receives a random
    kick drawn from ``[-curl * reverse, curl]``, the heading direction is
    added to the velocity (scaled by `step`), and the velocity is damped.
    `attract()` adds a `pull`-sized velocity increment toward a target.

    Args:
        x, y: Initial position.
        rng: Random source exposing ``uniform(low, high)``. Defaults to the
            thread-local RNG from `scribble.rng.get_rng`.
        config: Initial parameters; defaults to `PenConfig()`.

    Example:
        >>> pen = Pen(0, 0, rng=RNG(seed=1))
        >>> shapes.circle(pen, 100, 100, 50, 2000)
        >>> for stroke in pen.strokes: ...
    """

    __slots__ = (
        "_x", "_y", "_vx", "_vy", "_vr",
        "_damp", "_step", "_curl", "_pull", "_reverse",
        "_rng", "_strokes",
    )

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 rng: Optional[RNGBackend] = None,
                 config: Optional[PenConfig] = None) -> None:
        self._x, self._y = float(x), float(y)
        self._vx = self._vy = self._vr = 0.0
        self._rng: RNGBackend = rng if rng is not None else get_rng(thread_safe=True)
        self._strokes: List[Stroke] = []
        self.configure(config or PenConfig())

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------
    def configure(self, config: PenConfig) -> "Pen":
        """Apply all parameters from a PenConfig."""
        if not isinstance(config, PenConfig):
            raise TypeError(f"Unsupported config type: {type(config).__name__}")
        self.set_damp(config.damp)
        self.set_step(config.step)
        self.set_curl(config.curl)
        self.set_pull(config.pull)
        self.set_reverse(config.reverse)
        return self

    @property
    def config(self) -> PenConfig:
        """Current parameters in public scales."""
        return PenConfig(
            damp=self._damp,
            step=self._step,
            curl=self._curl / CURL_MAX * PUBLIC_SCALE,
            pull=self._pull / PULL_MAX * PUBLIC_SCALE,
            reverse=self._reverse,
        )

    def set_curl(self, curl: float) -> None:
        """How much the scribble curls. Suggested range 0-100, default 30."""
        self._curl = curl / PUBLIC_SCALE * CURL_MAX

    def set_pull(self, pull: float) -> None:
        """How strongly targets attract the pen. Suggested range 0-100, default 30."""
        self._pull = pull / PUBLIC_SCALE * PULL_MAX

    def set_damp(self, damp: float) -> None:
        """Fraction of velocity kept each step. 0 stops dead, 1 never slows.

        Not clamped: values above 1 make the motion grow instead of decay.
        """
        self._damp = damp

    def set_reverse(self, reverse: float) -> None:
        """Negative share of the curl range.

        0.5 (default) draws heading kicks from [-curl/2, curl], 1 from
        [-curl, curl], 0 from [0, curl]. Higher values meander, lower
        values make tight loops.
        """
        self._reverse = reverse

    def set_step(self, step: float) -> None:
        """Distance scale per step. Suggested range 0.5-5, default 1."""
        self._step = step

    @property
    def damp(self) -> float: return self._damp

    @property
    def step(self) -> float: return self._step

    @property
    def curl(self) -> float: return self._curl

    @property
    def pull(self) -> float: return self._pull

    @property
    def reverse(self) -> float: return self._reverse

    # -------------------------------------------------------------------------
    # State accessors
    # -------------------------------------------------------------------------
    @property
    def position(self) -> Point:
        return Point(self._x, self._y)

    @property
    def velocity(self) -> Tuple[float, float]:
        return self._vx, self._vy

    @property
    def heading(self) -> float:
        return self._vr

    @property
    def rng(self) -> RNGBackend:
        return self._rng

    @property
    def strokes(self) -> List[Stroke]:
        """Strokes drawn so far, oldest first."""
        return self._strokes

    @property
    def point_count(self) -> int:
        return sum(len(s) for s in self._strokes)

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------
    def relocate(self, x: float, y: float) -> None:
        """Jump to (x, y) and start a new stroke there.

        Velocity, heading and parameters carry over.
        """
        self._x, self._y = float(x), float(y)
        stroke = Stroke()
        stroke.append(self._x, self._y)
        self._strokes.append(stroke)

    def reserve(self, count: int) -> None:
        """Pre-size the active stroke for `count` more points."""
        if not self._strokes:
            self.relocate(self._x, self._y)
        self._strokes[-1].reserve(count)

    def advance(self) -> None:
        """Integrate one step and record the new position."""
        if not self._strokes:
            self.relocate(self._x, self._y)

        self._x += self._vx
        self._y += self._vy
        self._strokes[-1].append(self._x, self._y)

        self._vr += self._rng.uniform(-self._curl * self._reverse, self._curl)
        self._vx += math.cos(self._vr) * self._step
        self._vy += math.sin(self._vr) * self._step
        self._vx *= self._damp
        self._vy *= self._damp

    def attract(self, x: float, y: float) -> None:
        """Pull the pen toward (x, y).

        Several calls before the next `advance()` accumulate, so the pen
        tends toward the average of the targets.
        """
        angle = math.atan2(y - self._y, x - self._x)
        self._vx += math.cos(angle) * self._pull
        self._vy += math.sin(angle) * self._pull

    def clear(self) -> None:
        """Drop all strokes; position, velocity and heading are kept."""
        logger.debug(f"Clearing {len(self._strokes)} strokes ({self.point_count} points).")
        self._strokes = []

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"<Pen pos=({self._x:.3f}, {self._y:.3f}) "
            f"strokes={len(self._strokes)} points={self.point_count}>"
        )
