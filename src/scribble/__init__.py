from .rng import RNGBackend, RNG, get_rng, set_global_seed
from .geometry import Point
from .stroke import Stroke
from .config import PenConfig
from .pen import Pen
from .shapes import (
    line, circle, ellipse, arc, rectangle, path, dot,
    allocate_counts, rectangle_counts, path_counts,
)
from .logging_utils import configure_logging

__version__ = "0.1.0"

__all__ = [
    "RNGBackend", "RNG", "get_rng", "set_global_seed",
    "Point", "Stroke", "PenConfig", "Pen",
    "line", "circle", "ellipse", "arc", "rectangle", "path", "dot",
    "allocate_counts", "rectangle_counts", "path_counts",
    "configure_logging",
]
