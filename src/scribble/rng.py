"""
rng.py
------

Thread-safe and process-safe random source for the pen simulation.

- Supports both `random.Random` and `numpy.random.Generator` backends.
- Identical scalar API for both backends.
- Thread-safe lock for concurrent access.
- A Pen only needs `uniform(low, high)`, so any backend exposing it
  (this RNG, `random.Random`, `numpy.random.Generator`) can be injected.
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "get_rng", "set_global_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Optional, TypeAlias, Union

import numpy as np

# ---------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------
RNGBackend: TypeAlias = Union[random.Random, np.random.Generator, "RNG"]


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe hybrid random generator.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - Uses Python stdlib RNG by default.
        - `use_numpy=True` switches to `numpy.random.default_rng`.
        - `seed=None` seeds from PID/time entropy; `0` is a valid seed.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        seed_val = _entropy_seed() if seed is None else seed
        self._use_numpy = use_numpy

        if use_numpy:
            self._rng: RNGBackend = np.random.default_rng(seed_val)
        else:
            self._rng: RNGBackend = random.Random(seed_val)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            seed_val = _entropy_seed() if seed is None else seed
            if self._use_numpy:
                self._rng = np.random.default_rng(seed_val)
            else:
                self._rng.seed(seed_val)

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def uniform(self, *a, **kw) -> Union[float, np.ndarray]:
        """Return a uniform random value or array, matching backend behavior.

        NumPy scalars are converted to a Python float; arrays pass as is.
        """
        with self._lock:
            out = self._rng.uniform(*a, **kw)
            if self._use_numpy and isinstance(out, Real):
                return float(out)
            return out

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rng = RNG()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (shared or per-thread)."""
    if thread_safe:
        if not hasattr(_thread_local, "rng"):
            _thread_local.rng = RNG(use_numpy=use_numpy)
        return _thread_local.rng
    return _global_rng


def set_global_seed(seed: int) -> None:
    """Re-seed the global RNG and the calling thread's RNG.

    Pens built without an explicit `rng` draw from the thread-local RNG,
    so seeding both makes a default-pen scene reproducible.
    """
    _global_rng.seed(seed)
    get_rng(thread_safe=True).seed(seed)
