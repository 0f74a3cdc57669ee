"""Host platform collaborators: file store and preview service."""

from raw_preview_check.host.base import (
    PreviewManager,
    PreviewResult,
    SimpleFile,
    StoredFile,
    UserFolder,
)
from raw_preview_check.host.client import HostClient
from raw_preview_check.host.files import HttpUserFolder
from raw_preview_check.host.previews import HttpPreviewManager

__all__ = [
    "HostClient",
    "HttpPreviewManager",
    "HttpUserFolder",
    "PreviewManager",
    "PreviewResult",
    "SimpleFile",
    "StoredFile",
    "UserFolder",
]
