import pytest

from senseshift.hands import (
    Finger,
    GrabGesture,
    HandSide,
    PinchGesture,
    TotalCurl,
)
from senseshift.sensor import FloatSensor


def _grab_fingers():
    return GrabGesture.Fingers(
        index=FloatSensor(), middle=FloatSensor(), ring=FloatSensor(), pinky=FloatSensor()
    )


def test_enums_order():
    assert [HandSide(i).value for i in range(2)] == [0, 1]
    assert [Finger(i) for i in range(5)] == [
        Finger.THUMB,
        Finger.INDEX,
        Finger.MIDDLE,
        Finger.RING,
        Finger.LITTLE,
    ]
    with pytest.raises(ValueError):
        Finger(5)


def test_grab_requires_all_fingers():
    fingers = _grab_fingers()
    gesture = GrabGesture(fingers)
    gesture.init()

    for sensor in (fingers.index, fingers.middle, fingers.ring):
        sensor.publish_state(0.9)
    gesture.tick()
    assert gesture.value is False

    fingers.pinky.publish_state(0.9)
    gesture.tick()
    assert gesture.value is True


def test_grab_threshold_is_strict():
    fingers = _grab_fingers()
    gesture = GrabGesture(fingers, threshold=0.5)
    for sensor in (fingers.index, fingers.middle, fingers.ring, fingers.pinky):
        sensor.publish_state(0.5)
    gesture.tick()
    assert gesture.value is False


def test_grab_without_callbacks_waits_for_tick():
    fingers = _grab_fingers()
    gesture = GrabGesture(fingers)
    gesture.init()
    for sensor in (fingers.index, fingers.middle, fingers.ring, fingers.pinky):
        sensor.publish_state(1.0)
    assert gesture.value is False
    gesture.tick()
    assert gesture.value is True


def test_grab_with_callbacks_updates_immediately():
    fingers = _grab_fingers()
    gesture = GrabGesture(fingers, attach_callbacks=True)
    gesture.init()
    for sensor in (fingers.index, fingers.middle, fingers.ring, fingers.pinky):
        sensor.publish_state(1.0)
    assert gesture.value is True

    fingers.ring.publish_state(0.0)
    assert gesture.value is False


def test_pinch_gesture():
    fingers = PinchGesture.Fingers(thumb=FloatSensor(), index=FloatSensor())
    gesture = PinchGesture(fingers, threshold=0.3, attach_callbacks=True)
    gesture.init()

    fingers.thumb.publish_state(0.4)
    assert gesture.value is False
    fingers.index.publish_state(0.4)
    assert gesture.value is True
    fingers.thumb.publish_state(0.2)
    assert gesture.value is False


def test_total_curl_equal_joints():
    joints = [FloatSensor(), FloatSensor(), FloatSensor()]
    curl = TotalCurl(joints)
    curl.init()
    for joint in joints:
        joint.publish_state(0.75)
    curl.tick()
    assert curl.value == pytest.approx(0.75)


def test_total_curl_lies_between_joint_values():
    joints = [FloatSensor(), FloatSensor()]
    curl = TotalCurl(joints, attach_callbacks=True)
    curl.init()
    joints[0].publish_state(0.2)
    joints[1].publish_state(0.8)
    assert 0.2 < curl.value < 0.8
    assert curl.value == pytest.approx(0.5)


def test_total_curl_without_joints_keeps_value():
    curl = TotalCurl([])
    curl.init()
    curl.tick()
    assert curl.value == 0.0


def test_total_curl_waits_for_tick_without_callbacks():
    joint = FloatSensor()
    curl = TotalCurl([joint])
    curl.init()
    joint.publish_state(0.6)
    assert curl.value == 0.0
    curl.tick()
    assert curl.value == pytest.approx(0.6)