"""Integration tests for the HTTP host collaborators.

Integration tests:
- Run the harness against the in-memory fake host (tests/fake_host.py)
- Go through real httpx request/response handling via ASGITransport

Markers:
- @pytest.mark.integration - All integration tests
"""
