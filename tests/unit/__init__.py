"""Unit tests for raw-preview-check.

Unit tests should:
- Not touch the network or a host platform
- Use httpx.MockTransport and in-memory doubles for collaborators
- Be fast to execute
"""
