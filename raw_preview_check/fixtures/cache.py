"""Local cache of downloaded RAW fixtures."""

import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import httpx

from raw_preview_check.core.logging import get_logger
from raw_preview_check.fixtures.assets import FixtureAsset

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


def calculate_checksum(content: bytes) -> str:
    """Calculate SHA-1 checksum."""
    return hashlib.sha1(content).hexdigest()


def file_checksum(path: Path) -> str:
    """Calculate SHA-1 checksum of a file without loading it whole."""
    digest = hashlib.sha1()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


@dataclass
class CacheReport:
    """What a load pass did for each asset."""

    cached: list[str] = field(default_factory=list)
    downloaded: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing


class FixtureCache:
    """
    Materializes fixture assets under a cache directory.

    A file already present with the expected digest is reused without network
    access. A file with any other digest is removed and the asset is
    downloaded once, then written only when the downloaded bytes match the
    expected digest. Failures leave the asset unresolved; reading it later
    raises FileNotFoundError.
    """

    def __init__(
        self,
        cache_dir: Path,
        client: httpx.Client | None = None,
        timeout: float = 120.0,
    ) -> None:
        self.cache_dir = Path(cache_dir)
        self._client = client
        self._timeout = timeout

    def path_for(self, asset: FixtureAsset) -> Path:
        return self.cache_dir / asset.file_name

    def is_valid(self, asset: FixtureAsset) -> bool:
        """Check whether the cached copy exists and matches its digest."""
        path = self.path_for(asset)
        return path.is_file() and file_checksum(path) == asset.expected_digest

    def read(self, asset: FixtureAsset) -> bytes:
        return self.path_for(asset).read_bytes()

    def load(self, assets: Iterable[FixtureAsset]) -> CacheReport:
        """Make every asset available locally, fetching what is missing."""
        report = CacheReport()
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        if self._client is not None:
            self._load_all(assets, self._client, report)
        else:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                self._load_all(assets, client, report)

        logger.info(
            "fixture_cache_loaded",
            cache_dir=str(self.cache_dir),
            cached=len(report.cached),
            downloaded=len(report.downloaded),
            missing=len(report.missing),
        )
        return report

    def _load_all(
        self,
        assets: Iterable[FixtureAsset],
        client: httpx.Client,
        report: CacheReport,
    ) -> None:
        for asset in assets:
            if self.is_valid(asset):
                logger.debug("fixture_cache_hit", file_name=asset.file_name)
                report.cached.append(asset.file_name)
                continue

            # A stale copy must never be read in place of the real fixture
            stale = self.path_for(asset)
            if stale.exists():
                logger.info("fixture_cache_stale", file_name=asset.file_name)
                stale.unlink()

            if self._fetch(asset, client):
                report.downloaded.append(asset.file_name)
            else:
                report.missing.append(asset.file_name)

    def _fetch(self, asset: FixtureAsset, client: httpx.Client) -> bool:
        url = asset.download_url
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "fixture_unavailable",
                file_name=asset.file_name,
                url=url,
                reason="download_failed",
                error=str(e),
            )
            return False

        content = response.content
        checksum = calculate_checksum(content)
        if checksum != asset.expected_digest:
            logger.warning(
                "fixture_unavailable",
                file_name=asset.file_name,
                url=url,
                reason="digest_mismatch",
                expected=asset.expected_digest,
                actual=checksum,
            )
            return False

        self.path_for(asset).write_bytes(content)
        logger.info(
            "fixture_downloaded",
            file_name=asset.file_name,
            size_bytes=len(content),
        )
        return True
