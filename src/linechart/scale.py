"""Linear scale: domain/range mapping and nice tick generation."""
import math
from typing import Callable, List, NamedTuple, Sequence, Tuple

from .interpolation import Interpolation
from .logger import logger


class TickSpec(NamedTuple):
    """Arithmetic progression of tick values covering a domain.

    ``stop`` is biased by half a step so that iterating with ``v <= stop``
    includes the last exact tick.
    """
    start: float
    stop: float
    step: float

    def values(self) -> List[float]:
        """Enumerate start, start + step, ... while the value is <= stop."""
        if not math.isfinite(self.step) or self.step <= 0:
            return []
        if not (math.isfinite(self.start) and math.isfinite(self.stop)):
            return []

        values = []
        i = 0
        current = self.start
        while current <= self.stop:
            values.append(current)
            i += 1
            # Multiply instead of accumulating to avoid drift
            current = self.start + i * self.step
        return values


def uninterpolate(a: float, b: float) -> Callable[[float], float]:
    """Return a function normalizing [a, b] onto [0, 1].

    A zero-width interval maps every input to 0.
    """
    diff = b - a
    k = 1 / diff if diff != 0 else 0

    def f(c: float) -> float:
        return (c - a) * k
    return f


def bilinear(
    domain: Sequence[float],
    range: Sequence[float],
    interpolation: Interpolation = Interpolation.LINEAR
) -> Callable[[float], float]:
    """Compose uninterpolate over domain with interpolate over range."""
    u = uninterpolate(domain[0], domain[1])
    i = interpolation.interpolate(range[0], range[1])

    def f(x: float) -> float:
        return i(u(x))
    return f


def scale_extent(domain: Sequence[float]) -> Tuple[float, float]:
    """Return (min, max) of the first and last domain elements."""
    start = domain[0]
    stop = domain[-1]
    return (start, stop) if start < stop else (stop, start)


def linear_tick_range(domain: Sequence[float], count: int) -> TickSpec:
    """Choose a nice tick step for about ``count`` divisions of the domain.

    Steps are 1, 2, 5 or 10 times a power of ten.
    """
    if count <= 0:
        raise ValueError(f"Tick count must be positive, got {count}")

    lo, hi = scale_extent(domain)
    span = hi - lo

    if span == 0:
        return TickSpec(lo, lo, 1)
    if not math.isfinite(span):
        return TickSpec(math.nan, math.nan, math.nan)

    ratio = span / count
    step = 10.0 ** math.floor(math.log10(ratio)) if ratio > 0 else 0.0
    if step == 0:
        # Subnormal spans underflow; tick the two ends
        return TickSpec(lo, hi, span)
    err = count / span * step

    # Filter ticks to get closer to the desired count
    if err <= 0.15:
        nice = step * 10
    elif err <= 0.35:
        nice = step * 5
    elif err <= 0.75:
        nice = step * 2
    else:
        nice = step
    # Near the float limit the refined step overflows to inf
    if math.isfinite(nice):
        step = nice

    start = math.ceil(lo / step) * step
    stop = math.floor(hi / step) * step + step * 0.5
    return TickSpec(start, stop, step)


class LinearScale:
    """Maps a numeric domain onto an output range and back.

    Instances are immutable: build a new scale when the bounds change.
    """

    def __init__(
        self,
        domain: Sequence[float] = (0, 1),
        range: Sequence[float] = (0, 1),
        interpolation: Interpolation = Interpolation.LINEAR
    ):
        self._domain = tuple(domain)
        self._range = tuple(range)
        self._interpolation = interpolation
        logger.debug("LinearScale domain=%s range=%s interpolation=%s",
                     self._domain, self._range, interpolation.name.lower())

    @property
    def domain(self) -> Tuple[float, ...]:
        return self._domain

    @property
    def range(self) -> Tuple[float, ...]:
        return self._range

    @property
    def interpolation(self) -> Interpolation:
        return self._interpolation

    def scale(self) -> Callable[[float], float]:
        """Return the forward mapping from domain values to range values."""
        return bilinear(self._domain, self._range, self._interpolation)

    def invert(self) -> Callable[[float], float]:
        """Return the inverse mapping from range values to domain values."""
        return bilinear(self._range, self._domain, self._interpolation)

    def ticks(self, count: int) -> TickSpec:
        """Return the nice tick spec for about ``count`` divisions."""
        return linear_tick_range(self._domain, count)

    def __repr__(self) -> str:
        return f"LinearScale(domain={list(self._domain)}, range={list(self._range)})"
