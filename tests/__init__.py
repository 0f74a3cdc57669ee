"""raw-preview-check Test Suite.

Test Structure:
    tests/
    ├── conftest.py          # Shared fixtures for all tests
    ├── fake_host.py         # In-memory host platform API
    ├── unit/                # Unit tests (no network, no host)
    ├── integration/         # Host collaborators against the fake host
    └── e2e/                 # Live conversion test (requires HOST_URL)

Run all offline tests:
    pytest -m "not e2e"

Run the live conversion test:
    HOST_URL=http://localhost:8000 HOST_EMAIL=... HOST_PASSWORD=... pytest -m e2e

Document cleanup needs a logged-in user, so an API key alone is not enough.
"""
