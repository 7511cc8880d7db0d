"""Calibrators that adapt raw sensor readings to an output range."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from senseshift.helpers import remap


def _clamp(value, low, high):
    return min(max(value, low), high)


def _all_int(*values) -> bool:
    return all(isinstance(value, int) for value in values)


class Calibrator(ABC):
    """Learns from input values and maps new input into a calibrated range."""

    @abstractmethod
    def reset(self) -> None:
        """Forget everything learned so far."""

    @abstractmethod
    def update(self, input_value: Any) -> None:
        """Learn from a new input value."""

    @abstractmethod
    def calibrate(self, input_value: Any) -> Any:
        """Return the calibrated form of ``input_value``."""


class Calibrated:
    """Mixin holding an optional calibrator and whether calibration is running."""

    calibrator: Calibrator | None = None
    is_calibrating: bool = False

    def clear_calibrator(self) -> None:
        self.calibrator = None

    def start_calibration(self) -> None:
        self.is_calibrating = True

    def stop_calibration(self) -> None:
        self.is_calibrating = False

    def reset_calibration(self) -> None:
        """Reset the calibrator, if there is one."""
        if self.calibrator is not None:
            self.calibrator.reset()


class MinMaxCalibrator(Calibrator):
    """Maps the smallest and largest inputs seen onto the output range."""

    def __init__(self, output_min=0.0, output_max=1.0) -> None:
        self.output_min = output_min
        self.output_max = output_max
        self._value_min = output_max
        self._value_max = output_min

    def reset(self) -> None:
        self._value_min = self.output_max
        self._value_max = self.output_min

    def update(self, input_value) -> None:
        if input_value < self._value_min:
            self._value_min = input_value
        if input_value > self._value_max:
            self._value_max = input_value

    def calibrate(self, input_value):
        if self._value_min > self._value_max:
            # No calibration data yet: answer with the middle of the output range.
            middle = (self.output_min + self.output_max) / 2.0
            return int(middle) if _all_int(self.output_min, self.output_max) else middle

        if input_value <= self._value_min:
            return self.output_min
        if input_value >= self._value_max:
            return self.output_max

        output = remap(input_value, self._value_min, self._value_max, self.output_min, self.output_max)
        return _clamp(output, self.output_min, self.output_max)


class _DeviationCalibrator(Calibrator):
    """Shared mapping of an input's deviation from a centre point."""

    def __init__(self, sensor_max, driver_max_deviation, output_min=0.0, output_max=1.0) -> None:
        self.sensor_max = sensor_max
        self.driver_max_deviation = driver_max_deviation
        self.output_min = output_min
        self.output_max = output_max
        self._integral = _all_int(sensor_max, driver_max_deviation, output_min, output_max)

    def _map_deviation(self, center, input_value):
        if self._integral:
            center = int(center)

        mapped = int(remap(input_value, self.output_min, self.output_max, 0, self.sensor_max))

        limit = int(self.driver_max_deviation)
        deviation = _clamp(int(mapped - center), -limit, limit)

        return remap(deviation, -limit, limit, self.output_min, self.output_max)


class CenterPointDeviationCalibrator(_DeviationCalibrator):
    """Learns the sensor's centre point and maps the deviation from it."""

    def __init__(self, sensor_max, driver_max_deviation, output_min=0.0, output_max=1.0) -> None:
        super().__init__(sensor_max, driver_max_deviation, output_min, output_max)
        self._range_min = sensor_max
        self._range_max = 0

    def reset(self) -> None:
        self._range_min = self.sensor_max
        self._range_max = 0

    def update(self, input_value) -> None:
        if input_value < self._range_min:
            self._range_min = remap(input_value, self.output_min, self.output_max, 0, self.sensor_max)
        if input_value > self._range_max:
            self._range_max = remap(input_value, self.output_min, self.output_max, 0, self.sensor_max)

    def calibrate(self, input_value):
        center = (self._range_min + self._range_max) / 2.0
        return self._map_deviation(center, input_value)


class FixedCenterPointDeviationCalibrator(_DeviationCalibrator):
    """Maps the deviation from the middle of the sensor range; learns nothing."""

    def reset(self) -> None:
        pass

    def update(self, input_value) -> None:
        pass

    def calibrate(self, input_value):
        return self._map_deviation(self.sensor_max / 2.0, input_value)