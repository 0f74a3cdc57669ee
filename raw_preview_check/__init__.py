"""Integration test harness for the camera RAW preview plugin."""

__version__ = "1.0.0"
