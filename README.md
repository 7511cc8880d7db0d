# senseshift

Building blocks for the input side of wearable haptic devices such as
gloves and vests: sensors with calibration and filter chains, value
callbacks, battery level estimation, hand gestures and a small event
dispatcher. It is a pure-Python library with no dependencies.

## Installation

From the project directory:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `senseshift.helpers`
  - `lerp(completion, start, end)`: linear interpolation.
  - `remap(value, min_value, max_value, min_out, max_out)`: maps a value from
    one range to another. With all-integer arguments the arithmetic is
    integral and division truncates toward zero. An empty or inverted input
    range returns the middle of the output range and logs an error.
  - `remap_simple(value, max_value, max_out)`: the same with both minimums at 0.
  - `lookup_table_interpolate_linear(lookup_table, value)`: interpolates
    between the two nearest keys of a mapping. Values outside the key range
    give the value at the nearest end. An empty table raises `ValueError`.
  - `CallbackManager`: a list of callbacks. `add`, `call` (or calling the
    manager itself) and `len()`.
- `senseshift.events`
  - `Event` (identified by `name`), the abstract `EventListener`
    (`handle_event`) and `EventDispatcher` (`add_event_listener`,
    `post_event`). Listeners receive posted events in the order they were
    registered.
  - The event names `EVENT_BATTERY_LEVEL`, `EVENT_CONNECTED` and
    `EVENT_DISCONNECTED`.
- `senseshift.interfaces`: the abstract `Initializable` (`init`) and `Output`
  (`init`, `write_state`) interfaces.
- `senseshift.calibration`
  - `Calibrator`: the abstract interface (`reset`, `update`, `calibrate`).
  - `Calibrated`: a mixin with `calibrator`, `is_calibrating`,
    `start_calibration`, `stop_calibration`, `reset_calibration` and
    `clear_calibrator`.
  - `MinMaxCalibrator(output_min=0.0, output_max=1.0)`: maps the smallest and
    largest inputs seen onto the output range. Before any update it returns
    the middle of the output range.
  - `CenterPointDeviationCalibrator(sensor_max, driver_max_deviation,
    output_min=0.0, output_max=1.0)`: learns the sensor's centre point and
    maps the deviation from it, clamped to `driver_max_deviation`.
  - `FixedCenterPointDeviationCalibrator(...)`: the same around the fixed
    centre `sensor_max / 2`. `reset` and `update` do nothing.
- `senseshift.filters`
  - `Filter`: the abstract interface (`filter(sensor, value)`).
  - `Filtered`: a mixin holding the `filters` list, with `add_filter`,
    `add_filters`, `set_filters` and `clear_filters`.
  - `AddFilter`, `SubtractFilter`, `MultiplyFilter`,
    `VoltageDividerFilter(r1, r2)`, `ClampFilter` (also available as
    `MinMaxFilter` and `RangeFilter`), `LambdaFilter`,
    `SlidingWindowMovingAverageFilter(window_size)`,
    `ExponentialMovingAverageFilter(alpha)`,
    `SinglePointDeadzoneFilter(deadzone, center=0.5)` (also available as
    `CenterDeadzoneFilter`), `LookupTableInterpolationFilter(lookup_table)`
    and `AnalogInvertFilter`.
- `senseshift.sensor`
  - `SimpleSensor`: the abstract interface with a `value` property.
  - `Sensor(value=0.0)`: `publish_state` stores a raw value, notifies the raw
    callbacks, runs the value through the calibrator (updating it first
    while calibrating) and the filters, then notifies the value callbacks.
    It has the `value` and `raw_value` properties, `add_value_callback`,
    `add_raw_value_callback`, `init` and `tick`.
  - `FloatSensor` and `BinarySensor`.
  - `SimpleSensorDecorator(source)`: reads a `SimpleSensor` and publishes its
    value on every `tick` (`update_value`, `read_raw_value`).
- `senseshift.analog_threshold`
  - `AnalogThresholdSensor(source, threshold_upper=0.5, threshold_lower=None,
    attach_callbacks=False)`: a binary sensor with hysteresis. It goes high
    when the source reaches the upper threshold and low when the source falls
    below the lower one. Without a lower threshold both thresholds are the
    same. With `attach_callbacks` it recalculates whenever the source
    publishes.
- `senseshift.battery`
  - `BatteryState(level)`: a frozen dataclass whose level runs from 0 to
    `BatteryState.MAX_LEVEL` (255). Out-of-range levels raise `ValueError`.
  - `BatteryLevelEvent(state)`: an `Event` named `EVENT_BATTERY_LEVEL`.
  - `LIPO_1S_42`: voltage-to-charge table of a single-cell 4.2 V LiPo battery.
  - `LookupTableInterpolateBatterySensor(voltage_source, lookup_table)`: after
    `init`, every value the voltage sensor publishes is turned into a
    `BatteryState`.
- `senseshift.hands`
  - `HandSide`, `Finger` and `FINGERTIP_POSITION`.
  - `GrabGesture(GrabGesture.Fingers(index, middle, ring, pinky), threshold=0.5,
    attach_callbacks=False)`: on while all four fingers exceed the threshold.
  - `PinchGesture(PinchGesture.Fingers(thumb, index), ...)`: on while the thumb
    and index finger both exceed the threshold.
  - `TotalCurl(joints, attach_callbacks=False)`: the mean of the joints'
    values. It publishes nothing when there are no joints.
  - `Gesture` (an alias of `BinarySensor`) and `TriggerGesture` (an alias of
    `AnalogThresholdSensor`).

## Example

```python
from senseshift.filters import ClampFilter, ExponentialMovingAverageFilter
from senseshift.sensor import FloatSensor

sensor = FloatSensor()
sensor.add_filters([ExponentialMovingAverageFilter(0.5), ClampFilter(0.0, 1.0)])
sensor.add_value_callback(lambda value: print("value:", value))

sensor.publish_state(0.4)
sensor.publish_state(1.6)
```

A battery level read through a voltage sensor:

```python
from senseshift.battery import LIPO_1S_42, LookupTableInterpolateBatterySensor
from senseshift.sensor import FloatSensor

voltage = FloatSensor()
battery = LookupTableInterpolateBatterySensor(voltage, LIPO_1S_42)
battery.init()

voltage.publish_state(4.2)
print(battery.value.level)  # 255
```

## What this package does not do

The package does no hardware I/O. It has no pin, ADC, PWM or I2C drivers and
no Bluetooth or serial connection, and it cannot decode haptic protocols.
Sensor values come in only through `publish_state` or a `SimpleSensor`
that you write. `Output` is only an interface, so concrete actuators are
yours to implement. Nothing in the package runs a loop by itself: call
`tick()` on your sensors, or use `attach_callbacks` to chain them.