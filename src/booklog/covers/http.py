# ABOUTME: HTTP client abstraction for external metadata lookups.
# ABOUTME: Single-attempt GETs with a hard timeout and an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from booklog import __version__
from booklog.config import DEFAULT_LOOKUP_TIMEOUT
from booklog.errors import ExternalServiceError

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...


class BooklogHttpClient:
    """HTTP client for metadata API calls.

    Wraps httpx.Client. Each call makes exactly one attempt bounded by the
    timeout; any failure surfaces as ExternalServiceError.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_LOOKUP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": f"booklog/{__version__}"},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            ExternalServiceError: On transport errors, timeouts, non-2xx
                responses, an invalid URL, or a body that is not valid JSON.
        """
        try:
            response = self._client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise ExternalServiceError(f"Request timed out: {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ExternalServiceError(f"Request failed: {url}: {exc}") from exc

        logger.debug("GET %s -> %d", response.url, response.status_code)
        if not response.is_success:
            raise ExternalServiceError(f"HTTP {response.status_code} from {url}")

        try:
            return response.json()
        except ValueError as exc:
            raise ExternalServiceError(f"Malformed JSON from {url}") from exc

    def close(self) -> None:
        self._client.close()
