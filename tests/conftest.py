"""
Shared pytest fixtures for raw-preview-check tests.

Test categories:
    - Unit tests: MockTransport and in-memory doubles, no host
    - Integration tests: HTTP collaborators against tests/fake_host.py
    - E2E tests: live host configured through HOST_URL and credentials
"""

import hashlib
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# =============================================================================
# Environment Setup
# =============================================================================

# Load .env file FIRST so environment variables are available for skipif decorators
load_dotenv()

os.environ.setdefault("LOG_LEVEL", "WARNING")

from raw_preview_check.config import Settings  # noqa: E402
from raw_preview_check.core.logging import setup_logging  # noqa: E402
from raw_preview_check.fixtures.assets import FixtureAsset  # noqa: E402
from raw_preview_check.fixtures.cache import FixtureCache  # noqa: E402
from raw_preview_check.host.client import HostClient  # noqa: E402
from raw_preview_check.host.files import HttpUserFolder  # noqa: E402
from raw_preview_check.host.previews import HttpPreviewManager  # noqa: E402
from tests.fake_host import (  # noqa: E402
    TEST_EMAIL,
    TEST_PASSWORD,
    FakeHostState,
    create_fake_host,
)


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    setup_logging(log_level=os.environ["LOG_LEVEL"])


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at the fake host and a per-test fixture cache."""
    return Settings(
        _env_file=None,
        host_url="http://test",
        host_api_key="",
        host_email=TEST_EMAIL,
        host_password=TEST_PASSWORD,
        fixture_cache_dir=str(tmp_path / "fixtures"),
        log_level="WARNING",
    )


# =============================================================================
# Fixture Asset Helpers
# =============================================================================


def make_asset(file_name: str, content: bytes, url: str | None = None) -> FixtureAsset:
    """Build an asset whose digest matches content."""
    return FixtureAsset(
        source_url=url or f"https://fixtures.test/data/{file_name}",
        file_name=file_name,
        expected_digest=hashlib.sha1(content).hexdigest(),
    )


@pytest.fixture
def sample_raw_files() -> dict[str, bytes]:
    """Small stand-ins for RAW files, keyed by file name."""
    return {
        'Фото".NEF': b"NEF" + bytes(range(64)),
        "Canon_EOS_50D.CR2": b"II*\x00\x10\x00\x00\x00CR\x02\x00" + b"\x00" * 32,
        "Hasselblad_CF132.3FR": b"3FR" + b"\xff" * 48,
    }


@pytest.fixture
def sample_assets(sample_raw_files: dict[str, bytes]) -> tuple[FixtureAsset, ...]:
    return tuple(make_asset(name, content) for name, content in sample_raw_files.items())


@pytest.fixture
def fixture_cache(test_settings: Settings) -> FixtureCache:
    return FixtureCache(test_settings.cache_dir)


@pytest.fixture
def seeded_cache(
    fixture_cache: FixtureCache,
    sample_raw_files: dict[str, bytes],
) -> FixtureCache:
    """Cache already holding every sample asset."""
    fixture_cache.cache_dir.mkdir(parents=True, exist_ok=True)
    for name, content in sample_raw_files.items():
        (fixture_cache.cache_dir / name).write_bytes(content)
    return fixture_cache


# =============================================================================
# Fake Host Fixtures
# =============================================================================


@pytest.fixture
def host_state() -> FakeHostState:
    return FakeHostState()


@pytest.fixture
def fake_host(host_state: FakeHostState) -> FastAPI:
    return create_fake_host(host_state)


@pytest_asyncio.fixture
async def async_client(fake_host: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async client bound to the fake host."""
    async with AsyncClient(
        transport=ASGITransport(app=fake_host),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def host_client(
    test_settings: Settings,
    async_client: AsyncClient,
) -> AsyncGenerator[HostClient, None]:
    """Logged-in host client."""
    async with HostClient.from_settings(test_settings, client=async_client) as host:
        yield host


@pytest.fixture
def user_folder(host_client: HostClient) -> HttpUserFolder:
    return HttpUserFolder(host_client)


@pytest.fixture
def preview_manager(host_client: HostClient, test_settings: Settings) -> HttpPreviewManager:
    return HttpPreviewManager(host_client, plugin=test_settings.preview_plugin)
