"""Authenticated HTTP session against the host platform API."""

from typing import Any

import httpx

from raw_preview_check.config import Settings
from raw_preview_check.core.exceptions import (
    HostAuthenticationError,
    HostRequestError,
    NotFoundError,
)
from raw_preview_check.core.logging import get_logger

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return response.text


def raise_for_host_status(response: httpx.Response) -> None:
    """Map host error responses to harness exceptions."""
    if response.is_success:
        return

    detail = _error_detail(response)
    if response.status_code == 404:
        raise NotFoundError(detail or "Not found")
    if response.status_code in (401, 403):
        raise HostAuthenticationError(detail, status_code=response.status_code)
    raise HostRequestError(response.status_code, detail)


class HostClient:
    """
    Thin wrapper over httpx.AsyncClient for the host API.

    Authentication:
    - Email/password login when set, sending the JWT as Bearer token
    - Otherwise API key (X-API-Key header); enough for uploads and
      listings, but the host only lets logged-in users delete documents

    Usage:
        async with HostClient.from_settings(settings) as host:
            response = await host.request("GET", "/documents")
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        email: str = "",
        password: str = "",
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._email = email
        self._password = password
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._auth_headers: dict[str, str] = {}

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
    ) -> "HostClient":
        return cls(
            base_url=settings.host_url,
            api_key=settings.host_api_key,
            email=settings.host_email,
            password=settings.host_password,
            timeout=settings.host_timeout_seconds,
            client=client,
        )

    async def __aenter__(self) -> "HostClient":
        await self.authenticate()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def is_authenticated(self) -> bool:
        return bool(self._auth_headers)

    @property
    def has_user_session(self) -> bool:
        """True when requests carry a user's Bearer token."""
        return "Authorization" in self._auth_headers

    async def authenticate(self) -> None:
        """
        Resolve credentials into request headers.

        Email/password take precedence: user-only routes such as document
        deletion reject API keys. An API key alone authenticates as a source.
        """
        if self._email and self._password:
            await self._login()
            return

        if self._api_key:
            self._auth_headers = {"X-API-Key": self._api_key}
            return

        raise HostAuthenticationError(
            "No host credentials configured (set HOST_EMAIL/HOST_PASSWORD or HOST_API_KEY)"
        )

    async def _login(self) -> None:
        response = await self._client.post(
            f"{API_PREFIX}/auth/login",
            json={"email": self._email, "password": self._password},
        )
        raise_for_host_status(response)
        tokens = response.json()
        self._auth_headers = {"Authorization": f"Bearer {tokens['access_token']}"}
        logger.info("host_login_succeeded", email=self._email)

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Send an authenticated request to API_PREFIX + path.

        Raises:
            NotFoundError: host answered 404
            HostAuthenticationError: host answered 401/403
            HostRequestError: any other error status
        """
        if not self.is_authenticated:
            await self.authenticate()

        headers = {**kwargs.pop("headers", {}), **self._auth_headers}
        response = await self._client.request(
            method,
            f"{API_PREFIX}{path}",
            headers=headers,
            **kwargs,
        )
        logger.debug(
            "host_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise_for_host_status(response)
        return response
