"""User folder backed by the host upload and documents APIs."""

from pydantic import BaseModel

from raw_preview_check.core.exceptions import HostAuthenticationError
from raw_preview_check.core.logging import get_logger
from raw_preview_check.host.base import StoredFile, UserFolder
from raw_preview_check.host.client import HostClient

logger = get_logger(__name__)

PAGE_SIZE = 100


class UploadResponse(BaseModel):
    id: str
    filename: str
    content_type: str
    size_bytes: int
    document_type: str
    created_at: str


class DocumentResponse(BaseModel):
    id: str
    content_type: str
    size_bytes: int
    properties: dict = {}


class DocumentListResponse(BaseModel):
    documents: list[DocumentResponse]
    total: int
    page: int
    page_size: int


def stored_name_candidates(name: str) -> set[str]:
    """Names a file may be stored under after multipart encoding."""
    # httpx escapes quotes in multipart filenames as %22 (HTML5 form encoding)
    return {name, name.replace('"', "%22")}


class HttpUserFolder(UserFolder):
    """
    Root folder of the authenticated user on the host.

    Files are created through the upload plugin and resolved by their
    original filename among the user's documents.
    """

    def __init__(self, host: HostClient, upload_plugin: str = "upload") -> None:
        self._host = host
        self._upload_path = f"/plugins/{upload_plugin}/files"

    async def new_file(
        self,
        name: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> StoredFile:
        response = await self._host.request(
            "POST",
            self._upload_path,
            files={"file": (name, content, content_type)},
        )
        data = UploadResponse.model_validate(response.json())
        logger.info(
            "file_uploaded",
            file_name=name,
            document_id=data.id,
            document_type=data.document_type,
            size_bytes=data.size_bytes,
        )
        return StoredFile(
            id=data.id,
            name=name,
            content_type=data.content_type,
            size=data.size_bytes,
        )

    async def find(self, name: str) -> list[StoredFile]:
        candidates = stored_name_candidates(name)
        matches = []
        page = 1
        while True:
            response = await self._host.request(
                "GET",
                "/documents",
                params={"page": page, "page_size": PAGE_SIZE},
            )
            listing = DocumentListResponse.model_validate(response.json())

            for doc in listing.documents:
                if doc.properties.get("original_filename") in candidates:
                    matches.append(
                        StoredFile(
                            id=doc.id,
                            name=name,
                            content_type=doc.content_type,
                            size=doc.size_bytes,
                        )
                    )

            if page * listing.page_size >= listing.total or not listing.documents:
                break
            page += 1

        return matches

    async def delete(self, file: StoredFile) -> None:
        if not self._host.is_authenticated:
            await self._host.authenticate()
        if not self._host.has_user_session:
            raise HostAuthenticationError(
                "Deleting documents requires a logged-in user (set HOST_EMAIL/HOST_PASSWORD)"
            )
        await self._host.request("DELETE", f"/documents/{file.id}")
        logger.info("file_deleted", file_name=file.name, document_id=file.id)
