"""
config.py - Pen parameter configuration dataclass.

Values are kept in the public scales accepted by the Pen setters
(curl and pull on 0-100; damp, step, reverse verbatim). A frozen
config can be shared between pens, serialized with `to_dict()`, and
applied with `Pen.configure()`.
"""

__all__ = ["PenConfig",]

from dataclasses import asdict, dataclass, fields
from numbers import Real
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class PenConfig:
    """Immutable pen parameters in public scales."""
    damp: float = 0.7      # velocity kept per step; 1 means no damping
    step: float = 1.0      # forward speed scale
    curl: float = 30.0     # 0-100, max random heading kick
    pull: float = 30.0     # 0-100, attraction strength
    reverse: float = 0.5   # fraction of curl usable as a negative kick

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"Unsupported {f.name} type: {type(value).__name__}")
            object.__setattr__(self, f.name, float(value))

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PenConfig":
        """Build a config from a mapping; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise TypeError(f"Unknown PenConfig fields: {sorted(unknown)}")
        return cls(**data)
