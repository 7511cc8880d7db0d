"""Sensors with calibration, filter chains and value callbacks."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from senseshift.calibration import Calibrated
from senseshift.filters import Filtered
from senseshift.helpers import CallbackManager
from senseshift.interfaces import Initializable

_log = logging.getLogger(__name__)


class SimpleSensor(Initializable):
    """A hardware sensor (potentiometer, flex sensor, ...) with a current value."""

    @property
    @abstractmethod
    def value(self) -> Any:
        """The current sensor value."""


class Sensor(SimpleSensor, Calibrated, Filtered):
    """A sensor whose published raw values pass through calibration and filters."""

    def __init__(self, value: Any = 0.0) -> None:
        Filtered.__init__(self)
        self._raw_callbacks = CallbackManager()
        self._callbacks = CallbackManager()
        self._raw_value = value
        self._value = self._apply_filters(value)

    @property
    def value(self) -> Any:
        """The current filtered value."""
        return self._value

    @property
    def raw_value(self) -> Any:
        """The current unfiltered value."""
        return self._raw_value

    def add_value_callback(self, callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` with every new filtered value."""
        self._callbacks.add(callback)

    def add_raw_value_callback(self, callback: Callable[[Any], Any]) -> None:
        """Call ``callback`` with every new raw value."""
        self._raw_callbacks.add(callback)

    def init(self) -> None:
        pass

    def tick(self) -> None:
        pass

    def publish_state(self, raw_value: Any) -> None:
        """Store ``raw_value``, pass it through the chain and notify callbacks."""
        self._raw_value = raw_value
        self._raw_callbacks.call(self._raw_value)

        self._value = self._apply_filters(raw_value)
        self._callbacks.call(self._value)

    def _apply_filters(self, value: Any) -> Any:
        if self.calibrator is not None:
            if self.is_calibrating:
                self.calibrator.update(value)
            value = self.calibrator.calibrate(value)

        for filter_ in self.filters:
            value = filter_.filter(self, value)

        return value


class FloatSensor(Sensor):
    """A sensor with floating-point values."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value)


class BinarySensor(Sensor):
    """A sensor with boolean values."""

    def __init__(self, value: bool = False) -> None:
        super().__init__(value)


class SimpleSensorDecorator(Sensor):
    """Wraps a simple sensor, reading and publishing its value on every tick."""

    def __init__(self, source: SimpleSensor, value: Any = 0.0) -> None:
        super().__init__(value)
        self.source = source

    def init(self) -> None:
        self.source.init()

    def tick(self) -> None:
        self.update_value()

    def update_value(self) -> Any:
        """Read the source, publish its value and return the filtered result."""
        raw_value = self.read_raw_value()
        self.publish_state(raw_value)
        _log.debug("raw_value=%r, value=%r", raw_value, self.value)
        return self.value

    def read_raw_value(self) -> Any:
        """Return the source's current value."""
        return self.source.value