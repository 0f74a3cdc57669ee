"""Live conversion tests against a running host platform."""
