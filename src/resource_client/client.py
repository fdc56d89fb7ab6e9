import asyncio
import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx
from dotenv import load_dotenv

from .core.errors import (
    ResourceClientError,
    ResourceHTTPError,
    ResourceParseError,
    TransportError,
)
from .core.request import RequestDescriptor, TransportResponse
from .observability import log_event

HEADERS_OPTION = "headers"
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "PUT", "DELETE"})


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 2  # total extra attempts
    backoff_base_seconds: float = 0.3  # 0.3, 0.6, 1.2...
    retry_statuses: frozenset[int] = frozenset({502, 503, 504})
    retry_on_429: bool = False


def _is_json(media_type: Optional[str]) -> bool:
    if not media_type:
        return False
    base = media_type.split(";", 1)[0].strip().lower()
    return base == "application/json" or base.endswith("+json")


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value)
    return value


def serialize_params(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Turn pass-through options into query parameters.
    - dict/list values (filters, sort specs) are JSON-encoded
    - None values are dropped
    """
    return {
        key: _query_value(value)
        for key, value in options.items()
        if key != HEADERS_OPTION and value is not None
    }


class ResourceClient:
    """
    Shared HTTP transport for the resource service.
    - Handles base URL, optional bearer token, timeouts, retries
    - Implements the Dispatcher contract used by collection/relation resources
    - No addressing logic; resources own paths, methods and payloads
    """

    def __init__(
        self,
        *,
        base_url: str,
        access_token: Optional[str] = None,
        timeout_seconds: float = 10.0,
        retry: Optional[RetryConfig] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.retry = retry if retry is not None else RetryConfig()
        self.log = logger or logging.getLogger("resource_client.client")

        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "ResourceClient":
        load_dotenv()
        base_url = os.getenv("RESOURCE_CLIENT_BASE_URL", "").strip()
        access_token = os.getenv("RESOURCE_CLIENT_ACCESS_TOKEN", "").strip() or None
        return cls(base_url=base_url, access_token=access_token, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ResourceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def dispatch(self, request: RequestDescriptor) -> TransportResponse:
        """Send a composed resource request and return status, headers and body."""
        headers: Dict[str, str] = dict(request.options.get(HEADERS_OPTION) or {})
        if request.accept:
            headers["Accept"] = request.accept
        if request.content_type:
            headers["Content-Type"] = request.content_type

        json_body: Any = None
        content: Any = None
        if request.data is None:
            pass
        elif not request.content_type or _is_json(request.content_type):
            json_body = request.data
        elif isinstance(request.data, (str, bytes)):
            content = request.data
        else:
            raise ResourceClientError(
                f"Cannot send {type(request.data).__name__} body "
                f"as {request.content_type}"
            )

        return await self.request(
            request.method,
            request.url,
            params=serialize_params(request.options) or None,
            headers=headers,
            json=json_body,
            content=content,
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        json: Any = None,
        content: Any = None,
    ) -> TransportResponse:
        """
        Core request method.
        - Retries idempotent methods on transient failures (network/timeouts
          + 502/503/504; optionally 429). POST is sent once.
        - Raises ResourceHTTPError on non-2xx HTTP responses
        - Raises TransportError on network/timeout errors after retries
        - Raises ResourceParseError if a JSON response can't be decoded
        """
        method = method.upper()
        start = time.perf_counter()
        max_retries = self.retry.max_retries if method in IDEMPOTENT_METHODS else 0

        attempt = 0

        while True:
            try:
                resp = await self.http.request(
                    method,
                    url,
                    params=params,
                    headers=headers,
                    json=json,
                    content=content,
                )
                duration_ms = int((time.perf_counter() - start) * 1000)

                log_event(
                    "resource.request",
                    self.log,
                    level=logging.DEBUG,
                    method=method,
                    url=str(resp.request.url),
                    status=resp.status_code,
                    duration_ms=duration_ms,
                    attempt=attempt,
                )

                # Retry certain status codes
                if resp.status_code in self.retry.retry_statuses or (
                    self.retry.retry_on_429 and resp.status_code == 429
                ):
                    if attempt < max_retries:
                        await self._backoff(method, url, attempt, resp.status_code)
                        attempt += 1
                        continue

                if resp.status_code < 200 or resp.status_code >= 300:
                    raise self._to_http_error(resp, method=method)

                return TransportResponse(
                    status_code=resp.status_code,
                    headers={k.lower(): v for k, v in resp.headers.items()},
                    data=self._parse_body(resp),
                )

            except (httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout) as exc:
                if attempt < max_retries:
                    await self._backoff(method, url, attempt, type(exc).__name__)
                    attempt += 1
                    continue
                raise TransportError(
                    f"Network/timeout error calling {method} {url}: {exc}"
                ) from exc

            except httpx.HTTPError as exc:
                # Other httpx exceptions (rare) - do not blindly retry
                raise TransportError(
                    f"HTTPX error calling {method} {url}: {exc}"
                ) from exc

    async def _backoff(self, method: str, url: str, attempt: int, cause: Any) -> None:
        log_event(
            "resource.retry",
            method=method,
            path=url,
            attempt=attempt + 1,
            status=cause,
        )
        await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))

    def _parse_body(self, resp: httpx.Response) -> Any:
        # Handle empty responses (204 No Content, etc.)
        if not resp.content:
            return None

        if not _is_json(resp.headers.get("Content-Type")):
            return resp.text

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise ResourceParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got body snippet: {snippet!r}"
            ) from exc

    def _to_http_error(
        self, resp: httpx.Response, *, method: str
    ) -> ResourceHTTPError:
        url = str(resp.request.url)
        # Try JSON first; fall back to text snippet.
        response_json: Optional[Dict[str, Any]] = None
        response_text: Optional[str] = None
        message = "request failed"

        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                response_json = parsed
                message = (
                    parsed.get("errorDescription")
                    or parsed.get("message")
                    or parsed.get("error")
                    or message
                )
        except ValueError:
            response_text = (resp.text or "")[:500]

        return ResourceHTTPError(
            status_code=resp.status_code,
            method=method,
            url=url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )


__all__ = ["ResourceClient", "RetryConfig", "serialize_params"]
