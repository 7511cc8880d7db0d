"""Binary sensor derived from an analog sensor with hysteresis."""

from __future__ import annotations

import logging

from senseshift.sensor import BinarySensor, Sensor

_log = logging.getLogger(__name__)


class AnalogThresholdSensor(BinarySensor):
    """Turns an analog sensor into a binary one with hysteresis.

    The state goes high when the source reaches ``threshold_upper`` and
    low again when it falls below ``threshold_lower``. With no lower
    threshold given, both thresholds are the same.
    """

    def __init__(
        self,
        source: Sensor,
        threshold_upper: float = 0.5,
        threshold_lower: float | None = None,
        attach_callbacks: bool = False,
    ) -> None:
        super().__init__()
        self.source = source
        self.threshold_upper = threshold_upper
        self.threshold_lower = threshold_upper if threshold_lower is None else threshold_lower
        self.attach_callbacks = attach_callbacks

    def init(self) -> None:
        self.source.init()
        if self.attach_callbacks:
            self.source.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            _log.error("tick() called while callbacks are attached; state is recalculated twice")
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Compare the source's value against the active threshold and publish."""
        threshold = self.threshold_lower if self.value else self.threshold_upper
        self.publish_state(self.source.value >= threshold)