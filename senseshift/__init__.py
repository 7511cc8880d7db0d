"""Sensors, calibrators, filters, battery level estimation, hand gestures and events for wearable haptic devices."""

__version__ = "0.1.0"