"""Host platform collaborator interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from raw_preview_check.core.exceptions import NotFoundError


@dataclass(frozen=True)
class StoredFile:
    """File entry in a user's file store."""

    id: str
    name: str
    content_type: str
    size: int


@dataclass(frozen=True)
class SimpleFile:
    """Generated preview artifact."""

    name: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    def get_content(self) -> bytes:
        return self.content


@dataclass(frozen=True)
class PreviewResult:
    """Outcome of a preview request: an artifact, or none with a reason."""

    preview: SimpleFile | None = None
    reason: str = ""

    @property
    def found(self) -> bool:
        return self.preview is not None

    @classmethod
    def of(cls, preview: SimpleFile) -> "PreviewResult":
        return cls(preview=preview)

    @classmethod
    def absent(cls, reason: str = "not found") -> "PreviewResult":
        return cls(preview=None, reason=reason)


class UserFolder(ABC):
    """Root folder of one user's file store."""

    @abstractmethod
    async def new_file(
        self,
        name: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> StoredFile:
        """Create a file with the given content."""
        ...

    @abstractmethod
    async def find(self, name: str) -> list[StoredFile]:
        """Return every file stored under name (empty when there is none)."""
        ...

    async def get(self, name: str) -> StoredFile:
        """
        Fetch a file by name.
        Raises NotFoundError when no such file exists.
        """
        matches = await self.find(name)
        if not matches:
            raise NotFoundError(f"File not found: {name}")
        return matches[0]

    @abstractmethod
    async def delete(self, file: StoredFile) -> None:
        """Delete a file previously returned by this folder."""
        ...

    async def exists(self, name: str) -> bool:
        try:
            await self.get(name)
        except NotFoundError:
            return False
        return True

    async def delete_by_name(self, name: str) -> None:
        """Look a file up by name and delete it."""
        await self.delete(await self.get(name))


class PreviewManager(ABC):
    """Preview generation service of the host."""

    @abstractmethod
    async def get_preview(self, file: StoredFile, width: int, height: int) -> PreviewResult:
        """
        Request a preview of at most width x height.
        Returns an absent result when the host cannot produce one.
        """
        ...
