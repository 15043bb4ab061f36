"""Interpolation modes for linear scales."""
from enum import Enum, auto
from typing import Callable


class Interpolation(Enum):
    """How a unit parameter is mapped back onto an output interval."""
    LINEAR = auto()   # a + (b - a) * t (default)
    LEGACY = auto()   # (a + (b - a)) * t, drops the offset of a

    @classmethod
    def from_string(cls, mode_str: str) -> 'Interpolation':
        """Create Interpolation from string representation."""
        mode_map = {
            'linear': cls.LINEAR,
            'legacy': cls.LEGACY,
        }
        mode_lower = mode_str.lower()
        if mode_lower not in mode_map:
            valid_modes = ', '.join(sorted(mode_map.keys()))
            raise ValueError(f"Invalid interpolation: {mode_str}. Valid modes: {valid_modes}")
        return mode_map[mode_lower]

    def interpolate(self, a: float, b: float) -> Callable[[float], float]:
        """Return a function mapping t in [0, 1] onto [a, b]."""
        diff = b - a
        if self == Interpolation.LEGACY:
            def f(t: float) -> float:
                return (a + diff) * t
        else:
            def f(t: float) -> float:
                return a + diff * t
        return f

    def describe(self) -> str:
        """Get a human-readable description of the interpolation mode."""
        descriptions = {
            Interpolation.LINEAR: "Linear interpolation a + (b - a) * t",
            Interpolation.LEGACY: "Legacy widget interpolation (a + (b - a)) * t",
        }
        return descriptions.get(self, "Unknown interpolation")
