import pytest

from senseshift.battery import (
    LIPO_1S_42,
    BatteryLevelEvent,
    BatteryState,
    LookupTableInterpolateBatterySensor,
)
from senseshift.events import EVENT_BATTERY_LEVEL, EventDispatcher, EventListener
from senseshift.sensor import FloatSensor


def test_battery_sensor():
    source = FloatSensor()
    battery = LookupTableInterpolateBatterySensor(source, LIPO_1S_42)
    battery.init()

    source.publish_state(0.0)
    assert battery.value.level == 0

    source.publish_state(4.2)
    assert battery.value.level == 255

    source.publish_state(3.7)
    assert battery.value.level == 31


def test_battery_sensor_starts_empty():
    battery = LookupTableInterpolateBatterySensor(FloatSensor(), LIPO_1S_42)
    assert battery.value == BatteryState(level=0)


def test_battery_sensor_ignores_source_before_init():
    source = FloatSensor()
    battery = LookupTableInterpolateBatterySensor(source, LIPO_1S_42)
    source.publish_state(4.2)
    assert battery.value.level == 0


def test_battery_sensor_above_range_is_full():
    source = FloatSensor()
    battery = LookupTableInterpolateBatterySensor(source, LIPO_1S_42)
    battery.init()
    source.publish_state(5.0)
    assert battery.value.level == BatteryState.MAX_LEVEL


def test_voltage_map_end_points():
    source = FloatSensor()
    battery = LookupTableInterpolateBatterySensor(source, LIPO_1S_42)
    battery.init()

    source.publish_state(3.27)
    assert battery.value.level == 0

    source.publish_state(4.2)
    assert battery.value.level == 255


def test_battery_state_rejects_out_of_range():
    with pytest.raises(ValueError):
        BatteryState(level=256)
    with pytest.raises(ValueError):
        BatteryState(level=-1)


def test_battery_level_event_carries_state():
    state = BatteryState(level=200)
    event = BatteryLevelEvent(state)
    assert event.name == EVENT_BATTERY_LEVEL
    assert event.state is state


def test_battery_level_event_dispatched():
    received = []

    class Recorder(EventListener):
        def handle_event(self, event):
            received.append(event)

    dispatcher = EventDispatcher()
    dispatcher.add_event_listener(Recorder())
    event = BatteryLevelEvent(BatteryState(level=128))
    dispatcher.post_event(event)

    assert received == [event]
    assert received[0].state.level == 128