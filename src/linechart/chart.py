"""Headless line chart model built on linear scales.

The model stores series, builds one scale per axis on layout and answers
geometry questions in view coordinates (y grows downward). Drawing is left
to the caller.
"""
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from .formatting import format_y_value
from .interpolation import Interpolation
from .logger import logger
from .scale import LinearScale, TickSpec
from .utils import clamp_index, round_half_away, series_extent


@dataclass
class ChartConfig:
    """Chart geometry and labelling options."""
    x_grid_count: int = 10
    y_grid_count: int = 10
    x_axis_inset: float = 15
    y_axis_inset: float = 15
    # Moves lines away from the chart edges
    inner_margin: float = 0.0
    # Widest Y label, measured by the caller
    y_label_width: float = 0.0
    shorten_big_numbers: bool = False
    interpolation: Interpolation = Interpolation.LINEAR


class Margins(NamedTuple):
    top: float
    left: float
    bottom: float
    right: float


class Selection(NamedTuple):
    """A selected column: its index, x position and one value per series."""
    column: int
    x: float
    y_values: List[float]


class Axis:
    """Scale and tick spec of one axis, rebuilt on every layout."""

    def __init__(self, linear: LinearScale, grid_count: int):
        self.linear = linear
        self.scale = linear.scale()
        self.invert = linear.invert()
        self.ticks = linear.ticks(grid_count)


class LineChart:
    def __init__(self, config: Optional[ChartConfig] = None,
                 on_select: Optional[Callable[[Selection], None]] = None):
        self.config = config or ChartConfig()
        self.on_select = on_select
        self._series: List[List[float]] = []
        self._width = 0.0
        self._height = 0.0
        self._margins = Margins(0, 0, 0, 0)
        self._x: Optional[Axis] = None
        self._y: Optional[Axis] = None

    @property
    def series(self) -> List[List[float]]:
        return [list(data) for data in self._series]

    @property
    def margins(self) -> Margins:
        return self._margins

    def add_line(self, values: Sequence[float]) -> None:
        """Add a series; the chart must be laid out again afterwards."""
        if not values:
            raise ValueError("Cannot add an empty series")
        self._series.append([float(v) for v in values])
        self._invalidate()

    def clear(self) -> None:
        """Remove all series."""
        self._series = []
        self._invalidate()

    def minimum(self) -> float:
        return series_extent(self._series)[0]

    def maximum(self) -> float:
        return series_extent(self._series)[1]

    def layout(self, width: float, height: float) -> None:
        """Build the axis scales for a view of the given size."""
        if not self._series:
            raise ValueError("No data to lay out")

        cfg = self.config
        self._width = width
        self._height = height
        left = max(cfg.y_label_width, cfg.x_axis_inset) + 8
        self._margins = Margins(
            top=cfg.y_axis_inset,
            left=left,
            bottom=cfg.y_axis_inset,
            right=cfg.x_axis_inset,
        )

        drawing_height = height - 2 * cfg.y_axis_inset
        drawing_width = width - self._margins.left - self._margins.right
        # Ranges start at 0; positions add the inner margin once
        self._y = Axis(
            LinearScale(
                domain=(self.minimum(), self.maximum()),
                range=(0, drawing_height - cfg.inner_margin * 2),
                interpolation=cfg.interpolation,
            ),
            cfg.y_grid_count,
        )
        self._x = Axis(
            LinearScale(
                domain=(0, self.point_count() - 1),
                range=(0, drawing_width - cfg.inner_margin * 2),
                interpolation=cfg.interpolation,
            ),
            cfg.x_grid_count,
        )
        logger.debug("Layout %sx%s margins=%s x=%s y=%s",
                     width, height, self._margins, self._x.linear, self._y.linear)

    def point_count(self) -> int:
        """Number of columns, taken from the first series."""
        return len(self._series[0]) if self._series else 0

    def x_position(self, column: float) -> float:
        """View x coordinate of a column index."""
        x = self._axis('x')
        return x.scale(column) + self._margins.left + self.config.inner_margin

    def y_position(self, value: float) -> float:
        """View y coordinate of a data value."""
        y = self._axis('y')
        return self._height - y.scale(value) - self._margins.bottom - self.config.inner_margin

    def points(self, line_index: int) -> List[Tuple[float, float]]:
        """View coordinates of every point of a series."""
        data = self._series[line_index]
        return [(self.x_position(i), self.y_position(v)) for i, v in enumerate(data)]

    def baseline(self) -> float:
        """View y coordinate of the zero line, where areas are closed."""
        return self.y_position(0)

    def x_ticks(self) -> List[float]:
        return self._axis('x').ticks.values()

    def y_ticks(self) -> List[float]:
        return self._axis('y').ticks.values()

    def tick_specs(self) -> Tuple[TickSpec, TickSpec]:
        return self._axis('x').ticks, self._axis('y').ticks

    def y_labels(self) -> List[Tuple[float, str]]:
        """Value axis labels as (tick value, text) pairs."""
        shorten = self.config.shorten_big_numbers
        return [(v, format_y_value(v, shorten)) for v in self.y_ticks()]

    def x_labels(self, values: Optional[Sequence[str]] = None) -> List[Tuple[float, str]]:
        """Column labels as (x position, text).

        Columns without a custom label fall back to their index.
        """
        values = values or []
        labels = []
        for i in range(self.point_count()):
            text = values[i] if i < len(values) else str(i)
            labels.append((self.x_position(i), text))
        return labels

    def column_at(self, pixel_x: float) -> int:
        """Resolve a pointer x position to the nearest column index."""
        x = self._axis('x')
        origin = self._margins.left + self.config.inner_margin
        inverted = x.invert(pixel_x - origin)
        column = clamp_index(round_half_away(inverted), self.point_count())
        logger.debug("Pointer x=%s inverted=%s column=%s", pixel_x, inverted, column)
        return column

    def y_values_at(self, column: int) -> List[float]:
        """One value per series, clamping the column to each series."""
        return [data[clamp_index(column, len(data))] for data in self._series]

    def select_data_point(self, column: int, notify: bool = True) -> Selection:
        """Select a column as if the user tapped it."""
        selection = Selection(
            column=column,
            x=self.x_position(column),
            y_values=self.y_values_at(column),
        )
        if notify and self.on_select is not None:
            self.on_select(selection)
        return selection

    def select_at(self, pixel_x: float, notify: bool = True) -> Selection:
        """Hit-test a pointer x position and select the matching column."""
        return self.select_data_point(self.column_at(pixel_x), notify)

    def highlight_x(self, pixel_x: float) -> float:
        """Pointer x clamped into the plot area, for a highlight line."""
        self._axis('x')
        right = self._width - self._margins.right
        lo = self._margins.left + self.config.inner_margin
        if pixel_x > right:
            pixel_x = right
        if pixel_x < lo:
            pixel_x = lo
        return pixel_x

    def _axis(self, name: str) -> Axis:
        axis = self._x if name == 'x' else self._y
        if axis is None:
            raise RuntimeError("Chart has not been laid out")
        return axis

    def _invalidate(self) -> None:
        self._x = None
        self._y = None
