"""Request dispatcher for the OKLink REST API."""

import os
import random
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx

from oklink_sdk._internal.dispatch.params import ParamValue, build_query
from oklink_sdk._internal.dispatch.redaction import redact_headers
from oklink_sdk._internal.http import (
    ACCESS_KEY_HEADER,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    create_http_client,
)
from oklink_sdk.exceptions import OklinkConfigError, OklinkTransportError
from oklink_sdk.result import Result

KeySelector = Callable[[Sequence[str]], str | None]


def random_key(keys: Sequence[str]) -> str | None:
    """Pick one key uniformly at random, or None if the pool is empty."""
    if not keys:
        return None
    return random.choice(keys)


def parse_keys(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated key list, dropping blanks."""
    if not raw:
        return ()
    return tuple(key.strip() for key in raw.split(",") if key.strip())


class RequestDispatcher:
    """Turns a logical call (path + named params) into one HTTP GET.

    The dispatcher owns the transport and the credential pool. Each call to
    `send()` selects at most one access key, issues exactly one request and
    wraps the decoded body in a `Result`. There is no retry, caching or rate
    limiting; transport failures surface as `OklinkTransportError`.

    Use `RequestDispatcher.from_env()` to create a dispatcher from environment
    variables.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        keys: Sequence[str] = (),
        key_selector: KeySelector | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            base_url: The OKLink API host.
            keys: Access keys to choose from per request.
            key_selector: Strategy picking a key from the pool. Defaults to
                uniform-random choice.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional pre-configured client. When given, its own
                base URL and timeout apply and the caller owns its lifecycle.
        """
        self._base_url = base_url
        self._keys: tuple[str, ...] = tuple(keys)
        self._key_selector: KeySelector = key_selector or random_key
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._owns_client = http_client is None
        self._client = http_client or create_http_client(
            timeout_ms=timeout_ms, base_url=base_url
        )

    @classmethod
    def from_env(cls) -> "RequestDispatcher":
        """Create a dispatcher from environment variables.

        Optional environment variables:
            OKLINK_BASE_URL: The API host (default: production host).
            OKLINK_ACCESS_KEYS: Comma-separated access keys.
            OKLINK_KEY: Deprecated single-key fallback.
            OKLINK_TIMEOUT_MS: Request timeout in milliseconds.
            OKLINK_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured RequestDispatcher. Without keys, requests are sent
            unauthenticated.

        Raises:
            OklinkConfigError: If OKLINK_TIMEOUT_MS is not a positive integer.
        """
        base_url = os.environ.get("OKLINK_BASE_URL") or DEFAULT_BASE_URL

        # Prefer OKLINK_ACCESS_KEYS, fallback to deprecated OKLINK_KEY
        keys = parse_keys(os.environ.get("OKLINK_ACCESS_KEYS") or os.environ.get("OKLINK_KEY"))

        debug = os.environ.get("OKLINK_DEBUG", "") == "1"
        raw_timeout = os.environ.get("OKLINK_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
        try:
            timeout_ms = int(raw_timeout)
        except ValueError as e:
            raise OklinkConfigError(f"OKLINK_TIMEOUT_MS must be an integer, got {raw_timeout!r}") from e
        if timeout_ms <= 0:
            raise OklinkConfigError(f"OKLINK_TIMEOUT_MS must be positive, got {timeout_ms}")

        return cls(base_url=base_url, keys=keys, timeout_ms=timeout_ms, debug=debug)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def keys(self) -> tuple[str, ...]:
        """The configured credential pool."""
        return self._keys

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[oklink-sdk] {message}", file=sys.stderr)

    def select_key(self) -> str | None:
        """Pick the access key for one request, or None to send unauthenticated."""
        if not self._keys:
            return None
        return self._key_selector(self._keys) or None

    def _get_headers(self, access_key: str | None) -> dict[str, str]:
        if not access_key:
            return {}
        return {ACCESS_KEY_HEADER: access_key}

    async def send(
        self,
        path: str,
        params: Mapping[str, ParamValue] | None = None,
        *,
        schema: Any = None,
    ) -> Result[Any]:
        """Issue a GET request and wrap the response.

        Args:
            path: Endpoint path, e.g. "/api/v5/explorer/blockchain/info".
            params: Query parameters by wire name. None values are omitted.
            schema: Optional declared shape of the payload, attached to the
                returned Result.

        Returns:
            The Result built from the decoded response body.

        Raises:
            ValueError: If path is empty.
            TypeError: If a parameter value cannot be serialized.
            OklinkTransportError: On network failure, non-2xx status or a
                body that is not a JSON envelope.
        """
        if not path:
            raise ValueError("path must be a non-empty string")

        query = build_query(params)
        headers = self._get_headers(self.select_key())
        self._log_debug(f"GET {path} params={query} headers={redact_headers(headers)}")

        try:
            response = await self._client.get(path, params=query, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._log_debug(f"Request failed with status {e.response.status_code}")
            raise OklinkTransportError(
                f"GET {path} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            self._log_debug("Request timed out")
            raise OklinkTransportError(f"GET {path} timed out") from e
        except httpx.HTTPError as e:
            self._log_debug(f"Request error: {e}")
            raise OklinkTransportError(f"GET {path} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise OklinkTransportError(
                f"GET {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        result = Result.from_response(body, schema=schema)
        self._log_debug(f"Response code={result.code!r} msg={result.msg!r}")
        return result

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this dispatcher created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RequestDispatcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def get_request_dispatcher() -> RequestDispatcher:
    """Get a request dispatcher configured from environment variables.

    Returns:
        A configured RequestDispatcher instance.
    """
    return RequestDispatcher.from_env()
