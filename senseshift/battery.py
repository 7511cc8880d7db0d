"""Battery state, battery level events and a lookup-table battery sensor."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from senseshift.events import EVENT_BATTERY_LEVEL, Event
from senseshift.helpers import lookup_table_interpolate_linear
from senseshift.sensor import Sensor

_log = logging.getLogger(__name__)

#: Voltage to charge level (0.0 - 1.0) of a single-cell 4.2 V LiPo battery.
LIPO_1S_42: Mapping[float, float] = {
    4.2: 1.0,
    4.15: 0.95,
    4.11: 0.9,
    4.08: 0.85,
    4.02: 0.8,
    3.98: 0.75,
    3.95: 0.7,
    3.91: 0.65,
    3.87: 0.6,
    3.85: 0.55,
    3.84: 0.5,
    3.82: 0.45,
    3.8: 0.4,
    3.79: 0.35,
    3.77: 0.3,
    3.75: 0.25,
    3.73: 0.2,
    3.71: 0.15,
    3.69: 0.1,
    3.61: 0.05,
    3.27: 0.0,
}


@dataclass(frozen=True)
class BatteryState:
    """Battery charge level, from 0 (empty) to ``MAX_LEVEL`` (full)."""

    MAX_LEVEL: ClassVar[int] = 255

    level: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.level <= self.MAX_LEVEL:
            raise ValueError(f"battery level must be within 0..{self.MAX_LEVEL}, got {self.level}")


class BatteryLevelEvent(Event):
    """Announces a new battery state."""

    def __init__(self, state: BatteryState) -> None:
        super().__init__(EVENT_BATTERY_LEVEL)
        self.state = state


class LookupTableInterpolateBatterySensor(Sensor):
    """Derives the battery level from a voltage sensor through a lookup table."""

    def __init__(self, voltage_source: Sensor, lookup_table: Mapping[float, float]) -> None:
        super().__init__(BatteryState())
        self.voltage_source = voltage_source
        self.lookup_table = lookup_table

    def init(self) -> None:
        self.voltage_source.init()
        self.voltage_source.add_value_callback(self._on_voltage)

    def _on_voltage(self, voltage: float) -> None:
        level = lookup_table_interpolate_linear(self.lookup_table, voltage)
        _log.debug("voltage=%f, level=%f", voltage, level)
        self.publish_state(BatteryState(level=int(level * BatteryState.MAX_LEVEL)))