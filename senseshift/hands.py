"""Hand model and hand-input sensors: gestures and total finger curl."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from senseshift.analog_threshold import AnalogThresholdSensor
from senseshift.sensor import BinarySensor, FloatSensor, Sensor

_log = logging.getLogger(__name__)


class HandSide(IntEnum):
    LEFT = 0
    RIGHT = 1


class Finger(IntEnum):
    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    LITTLE = 4


#: Position (x, y) of a haptic device on the fingertip: distal phalanx, volar side.
FINGERTIP_POSITION = (127, 16)

Gesture = BinarySensor

#: A trigger gesture is an analog threshold over a single finger's curl.
TriggerGesture = AnalogThresholdSensor


class _FingerGesture(Gesture):
    """A gesture that is on while every finger's value exceeds the threshold."""

    _name = "gesture"

    def __init__(self, sensors: tuple[Sensor, ...], threshold: float, attach_callbacks: bool) -> None:
        super().__init__()
        self._sensors = sensors
        self.threshold = threshold
        self.attach_callbacks = attach_callbacks

    def init(self) -> None:
        for sensor in self._sensors:
            sensor.init()
            if self.attach_callbacks:
                sensor.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            _log.error("%s: tick() called while callbacks are attached", self._name)
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Publish whether all fingers are curled past the threshold."""
        self.publish_state(all(sensor.value > self.threshold for sensor in self._sensors))


@dataclass
class GrabFingers:
    index: FloatSensor
    middle: FloatSensor
    ring: FloatSensor
    pinky: FloatSensor


@dataclass
class PinchFingers:
    thumb: FloatSensor
    index: FloatSensor


class GrabGesture(_FingerGesture):
    """On while the index, middle, ring and pinky fingers are all curled."""

    Fingers = GrabFingers
    _name = "gesture.grab"

    def __init__(self, fingers: GrabFingers, threshold: float = 0.5, attach_callbacks: bool = False) -> None:
        super().__init__(
            (fingers.index, fingers.middle, fingers.ring, fingers.pinky),
            threshold,
            attach_callbacks,
        )
        self.fingers = fingers

    def init(self) -> None:
        super().init()

    def tick(self) -> None:
        super().tick()

    def recalculate_state(self) -> None:
        super().recalculate_state()


class PinchGesture(_FingerGesture):
    """On while the thumb and index finger are both curled."""

    Fingers = PinchFingers
    _name = "gesture.pinch"

    def __init__(self, fingers: PinchFingers, threshold: float = 0.5, attach_callbacks: bool = False) -> None:
        super().__init__((fingers.thumb, fingers.index), threshold, attach_callbacks)
        self.fingers = fingers

    def init(self) -> None:
        super().init()

    def tick(self) -> None:
        super().tick()

    def recalculate_state(self) -> None:
        super().recalculate_state()


class TotalCurl(FloatSensor):
    """The mean curl of a finger's joints.

    With ``attach_callbacks`` the value is recalculated on every joint update,
    which means once per joint per tick; otherwise only on ``tick()``.
    """

    def __init__(self, joints: Iterable[FloatSensor], attach_callbacks: bool = False) -> None:
        super().__init__()
        self.joints = list(joints)
        self.attach_callbacks = attach_callbacks

    def init(self) -> None:
        for joint in self.joints:
            joint.init()
            if self.attach_callbacks:
                joint.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            _log.error("total_curl: tick() called while callbacks are attached")
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Publish the mean of the joints' values; nothing when there are no joints."""
        if self.joints:
            self.publish_state(sum(joint.value for joint in self.joints) / len(self.joints))