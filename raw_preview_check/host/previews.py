"""Preview manager backed by the camera RAW preview plugin routes."""

from raw_preview_check.core.exceptions import NotFoundError
from raw_preview_check.core.logging import get_logger
from raw_preview_check.host.base import PreviewManager, PreviewResult, SimpleFile, StoredFile
from raw_preview_check.host.client import HostClient

logger = get_logger(__name__)


class HttpPreviewManager(PreviewManager):
    """Requests thumbnails from GET /plugins/{plugin}/files/{id}/preview."""

    def __init__(self, host: HostClient, plugin: str = "camera_raw_previews") -> None:
        self._host = host
        self._plugin = plugin

    async def get_preview(self, file: StoredFile, width: int, height: int) -> PreviewResult:
        try:
            response = await self._host.request(
                "GET",
                f"/plugins/{self._plugin}/files/{file.id}/preview",
                params={"width": width, "height": height},
            )
        except NotFoundError as e:
            logger.warning(
                "preview_not_found",
                file_name=file.name,
                document_id=file.id,
                detail=e.detail,
            )
            return PreviewResult.absent(e.detail)

        mime_type = response.headers.get("content-type", "application/octet-stream")
        preview = SimpleFile(
            name=f"{width}-{height}",
            mime_type=mime_type.split(";")[0].strip(),
            content=response.content,
        )
        logger.info(
            "preview_generated",
            file_name=file.name,
            mime_type=preview.mime_type,
            size_bytes=preview.size,
        )
        return PreviewResult.of(preview)
