"""Core harness infrastructure: logging and exceptions."""

from raw_preview_check.core.exceptions import (
    HostAuthenticationError,
    HostRequestError,
    NotFoundError,
    RawPreviewCheckError,
)
from raw_preview_check.core.logging import get_logger, setup_logging

__all__ = [
    "HostAuthenticationError",
    "HostRequestError",
    "NotFoundError",
    "RawPreviewCheckError",
    "get_logger",
    "setup_logging",
]
