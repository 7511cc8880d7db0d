"""Value filters that can be chained onto a sensor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from senseshift.helpers import lookup_table_interpolate_linear


class Filter(ABC):
    """Transforms one sensor value into another."""

    @abstractmethod
    def filter(self, sensor: Any, value: Any) -> Any:
        """Return the filtered form of ``value`` read from ``sensor``."""


class Filtered:
    """Mixin holding an ordered chain of filters."""

    def __init__(self) -> None:
        self.filters: list[Filter] = []

    def add_filter(self, filter_: Filter) -> None:
        """Append one filter to the end of the chain."""
        self.filters.append(filter_)

    def add_filters(self, filters: Iterable[Filter]) -> None:
        """Append several filters to the end of the chain."""
        self.filters.extend(filters)

    def set_filters(self, filters: Iterable[Filter]) -> None:
        """Replace the chain with ``filters``."""
        self.filters = list(filters)

    def clear_filters(self) -> None:
        """Remove every filter from the chain."""
        self.filters.clear()


class AddFilter(Filter):
    """Adds a fixed offset."""

    def __init__(self, offset) -> None:
        self.offset = offset

    def filter(self, sensor, value):
        return value + self.offset


class SubtractFilter(Filter):
    """Subtracts a fixed offset."""

    def __init__(self, offset) -> None:
        self.offset = offset

    def filter(self, sensor, value):
        return value - self.offset


class MultiplyFilter(Filter):
    """Multiplies by a fixed factor."""

    def __init__(self, factor) -> None:
        self.factor = factor

    def filter(self, sensor, value):
        return value * self.factor


class VoltageDividerFilter(MultiplyFilter):
    """Recovers the original voltage measured through a voltage divider.

    ``r1`` and ``r2`` are the resistances in ohms of the divider's first and
    second resistor, e.g. 27000.0 and 100000.0.
    """

    def __init__(self, r1: float, r2: float) -> None:
        super().__init__((r1 + r2) / r2)


class ClampFilter(Filter):
    """Clamps values into the range [``min_value``, ``max_value``]."""

    def __init__(self, min_value, max_value) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def filter(self, sensor, value):
        return min(max(value, self.min_value), self.max_value)


MinMaxFilter = ClampFilter
RangeFilter = ClampFilter


class LambdaFilter(Filter):
    """Applies an arbitrary one-argument function."""

    def __init__(self, function: Callable[[Any], Any]) -> None:
        self.function = function

    def filter(self, sensor, value):
        return self.function(value)


class SlidingWindowMovingAverageFilter(Filter):
    """Averages the last ``window_size`` values."""

    def __init__(self, window_size: int) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size
        self._window: deque = deque(maxlen=window_size)

    def filter(self, sensor, value):
        self._window.append(value)
        return sum(self._window) / len(self._window)


class ExponentialMovingAverageFilter(Filter):
    """Exponential moving average weighted by ``alpha``; the first value passes through."""

    def __init__(self, alpha: float) -> None:
        self.alpha = alpha
        self._is_first = True
        self._acc: Any = None

    def filter(self, sensor, value):
        if self._is_first:
            self._is_first = False
            self._acc = value
            return self._acc

        self._acc = self.alpha * value + (1 - self.alpha) * self._acc
        return self._acc


class SinglePointDeadzoneFilter(Filter):
    """Snaps values within ``deadzone`` of ``center`` onto ``center``."""

    def __init__(self, deadzone: float, center: float = 0.5) -> None:
        self.deadzone = deadzone
        self.center = center

    def filter(self, sensor, value):
        return self.center if abs(value - self.center) < self.deadzone else value


CenterDeadzoneFilter = SinglePointDeadzoneFilter


class LookupTableInterpolationFilter(Filter):
    """Interpolates values through a lookup table, e.g. voltage to battery level."""

    def __init__(self, lookup_table: Mapping) -> None:
        self.lookup_table = lookup_table

    def filter(self, sensor, value):
        return lookup_table_interpolate_linear(self.lookup_table, value)


class AnalogInvertFilter(Filter):
    """Inverts an analog value in the range 0.0 to 1.0."""

    def filter(self, sensor, value):
        return 1.0 - value