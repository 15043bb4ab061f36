__version__ = "0.1.0"

from .scale import (
    LinearScale,
    TickSpec,
    bilinear,
    uninterpolate,
    linear_tick_range,
)
from .interpolation import Interpolation
from .chart import (
    ChartConfig,
    LineChart,
    Selection,
)
from .formatting import format_y_value
from .core import load_series

__all__ = [
    "LinearScale",
    "TickSpec",
    "bilinear",
    "uninterpolate",
    "linear_tick_range",
    "Interpolation",
    "ChartConfig",
    "LineChart",
    "Selection",
    "format_y_value",
    "load_series",
]
