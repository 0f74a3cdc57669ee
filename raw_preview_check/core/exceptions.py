"""Harness exceptions."""


class RawPreviewCheckError(Exception):
    """Base class for harness errors."""


class HostRequestError(RawPreviewCheckError):
    """The host platform answered with an unexpected status."""

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"Host request failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NotFoundError(HostRequestError):
    """A file or preview lookup on the host failed."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(404, detail)


class HostAuthenticationError(HostRequestError):
    """No usable credentials, or the host rejected them."""

    def __init__(self, detail: str = "Authentication failed", status_code: int = 401) -> None:
        super().__init__(status_code, detail)
