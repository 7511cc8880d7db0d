"""Numeric helpers and a multi-subscriber callback list."""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Callable, Mapping
from typing import Any

_log = logging.getLogger(__name__)


def _div(numerator, denominator):
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(numerator, int) and isinstance(denominator, int):
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator >= 0) == (denominator > 0) else -quotient
    return numerator / denominator


def lerp(completion, start, end):
    """Linearly interpolate between ``start`` and ``end`` by ``completion`` (0..1)."""
    return start + (end - start) * completion


def remap(value, min_value, max_value, min_out, max_out):
    """Remap ``value`` from (``min_value``, ``max_value``) to (``min_out``, ``max_out``).

    When every argument is an integer the arithmetic is integral and the
    division truncates toward zero. An empty or inverted input range yields
    the middle of the output range.
    """
    if max_value <= min_value:
        _log.error("Invalid input range, min <= max")
        return _div(min_out + max_out, 2)

    return _div((value - min_value) * (max_out - min_out), max_value - min_value) + min_out


def remap_simple(value, max_value, max_out):
    """Remap ``value`` from (0, ``max_value``) to (0, ``max_out``)."""
    return _div(value * max_out, max_value)


def lookup_table_interpolate_linear(lookup_table: Mapping, value):
    """Look ``value`` up in ``lookup_table`` and interpolate between the nearest keys.

    Values outside the table's key range yield the value of the nearest end.
    """
    keys = sorted(lookup_table)
    if not keys:
        raise ValueError("lookup table is empty")

    if value <= keys[0]:
        return lookup_table[keys[0]]
    if value >= keys[-1]:
        return lookup_table[keys[-1]]

    index = bisect_left(keys, value)
    upper = keys[index]
    lower = keys[index - 1]

    completion = (value - lower) / (upper - lower)
    return lerp(completion, lookup_table[lower], lookup_table[upper])


class CallbackManager:
    """A list of callbacks that are all called with the same arguments."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def add(self, callback: Callable[..., Any]) -> None:
        """Add a callback to the list."""
        self._callbacks.append(callback)

    def call(self, *args: Any) -> None:
        """Call every callback, in the order they were added."""
        for callback in self._callbacks:
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __call__(self, *args: Any) -> None:
        self.call(*args)