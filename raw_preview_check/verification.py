"""Upload fixtures into a user folder and request a thumbnail for each."""

from dataclasses import dataclass
from typing import Sequence

from raw_preview_check.core.exceptions import NotFoundError
from raw_preview_check.core.logging import get_logger
from raw_preview_check.fixtures.assets import FixtureAsset
from raw_preview_check.fixtures.cache import FixtureCache
from raw_preview_check.host.base import PreviewManager, PreviewResult, SimpleFile, StoredFile, UserFolder

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionOutcome:
    """Preview result for one uploaded asset."""

    asset: FixtureAsset
    file: StoredFile
    result: PreviewResult

    @property
    def succeeded(self) -> bool:
        """True when a non-empty preview file came back."""
        preview = self.result.preview
        return isinstance(preview, SimpleFile) and preview.size > 0


class ConversionVerifier:
    """
    Drives the conversion check for a list of fixture assets.

    verify() uploads each asset and asks the preview service for a thumbnail.
    A missing preview is recorded, never raised, so every asset is tried.
    Errors from the file store or the preview service propagate.
    """

    def __init__(
        self,
        folder: UserFolder,
        previews: PreviewManager,
        cache: FixtureCache,
        width: int = 100,
        height: int = 100,
    ) -> None:
        self.folder = folder
        self.previews = previews
        self.cache = cache
        self.width = width
        self.height = height

    async def verify(self, assets: Sequence[FixtureAsset]) -> list[ConversionOutcome]:
        outcomes = []
        for asset in assets:
            # FileNotFoundError here means the fixture never made it into the cache
            content = self.cache.read(asset)
            file = await self.folder.new_file(asset.file_name, content, asset.content_type)
            result = await self.previews.get_preview(file, self.width, self.height)

            outcome = ConversionOutcome(asset=asset, file=file, result=result)
            logger.info(
                "conversion_checked",
                file_name=asset.file_name,
                succeeded=outcome.succeeded,
                reason=result.reason or None,
            )
            outcomes.append(outcome)
        return outcomes

    async def cleanup(self, assets: Sequence[FixtureAsset]) -> list[str]:
        """
        Delete every asset's file from the folder.

        Copies left behind by an aborted earlier run share the name and are
        removed too. Each file found by the initial lookup is deleted once.
        Returns the names of the deleted files, one per file.
        """
        deleted = []
        for asset in assets:
            matches = await self.folder.find(asset.file_name)
            if not matches:
                logger.debug("cleanup_skipped", file_name=asset.file_name)
                continue
            for file in matches:
                try:
                    await self.folder.delete(file)
                except NotFoundError:
                    logger.debug("cleanup_already_gone", file_name=file.name, document_id=file.id)
                    continue
                deleted.append(asset.file_name)
        return deleted


def failed_conversions(outcomes: Sequence[ConversionOutcome]) -> list[str]:
    """Names of assets without a usable preview."""
    return [o.asset.file_name for o in outcomes if not o.succeeded]
