"""
Async HTTP client for the Dropbox RPC API.

Implements the two call shapes used by the Paper endpoints: metadata calls
(JSON in, JSON out) and content calls (JSON argument in a request header,
JSON result in a response header, raw bytes in the body).
"""

import asyncio
import json
from collections.abc import Mapping
from typing import Any, Self

import httpx
import structlog

from dropbox_paper.config import PaperConfig
from dropbox_paper.exceptions import (
    EncodingError,
    RemoteError,
    RequestCancelledError,
    TransportError,
)

logger = structlog.get_logger(__name__)

# Request and response header names differ; both are fixed by the API.
API_ARG_HEADER = "Dropbox-API-Arg"
API_RESULT_HEADER = "Dropbox-API-Result"

SENSITIVE_HEADERS = frozenset({"authorization", API_ARG_HEADER.lower()})


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """
    Remove sensitive header values before logging.

    Args:
        headers: Request headers that may contain credentials.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    return {
        key: "***" if key.lower() in SENSITIVE_HEADERS else value for key, value in headers.items()
    }


class PaperHttpClient:
    """Async HTTP client for the Dropbox RPC API."""

    def __init__(
        self,
        token: str,
        config: PaperConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: Bearer token sent with every request.
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._token = token
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_url,
            timeout=config.timeout,
            transport=transport,
            headers={"User-Agent": config.user_agent},
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def rpc(
        self,
        endpoint: str,
        arg: Mapping[str, Any],
        *,
        deadline: float | None = None,
    ) -> dict[str, Any]:
        """
        Make a metadata call: JSON request body, JSON response body.

        Args:
            endpoint: API path (e.g., "/2/paper/docs/list").
            arg: JSON-serializable request argument.
            deadline: Seconds the whole call may take; None for no limit.

        Returns:
            Decoded response object.

        Raises:
            EncodingError: If the argument or the response cannot be (de)serialized.
            TransportError: If no response was obtained.
            RemoteError: If the API returned a non-200 status.
            RequestCancelledError: If the deadline expired.
        """
        body = _encode_arg(arg, endpoint).encode()
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        response = await self._send(endpoint, headers, body, deadline=deadline, shape="rpc")

        if response.status_code != httpx.codes.OK:
            _raise_api_error(response, endpoint)

        return _decode_object(response.content, endpoint, source="body")

    async def content(
        self,
        endpoint: str,
        arg: Mapping[str, Any],
        *,
        deadline: float | None = None,
    ) -> tuple[dict[str, Any] | None, bytes]:
        """
        Make a content call: argument in a header, result in a header, bytes in the body.

        No request body and no Content-Type are sent.

        Args:
            endpoint: API path (e.g., "/2/paper/docs/download").
            arg: JSON-serializable request argument.
            deadline: Seconds the whole call may take; None for no limit.

        Returns:
            Tuple of (decoded result header or None when absent, response body).

        Raises:
            EncodingError: If the argument or the result header cannot be (de)serialized.
            TransportError: If no response was obtained.
            RemoteError: If the API returned a non-200 status.
            RequestCancelledError: If the deadline expired.
        """
        headers = {
            "Authorization": f"Bearer {self._token}",
            API_ARG_HEADER: _encode_arg(arg, endpoint),
        }
        response = await self._send(endpoint, headers, None, deadline=deadline, shape="content")

        if response.status_code != httpx.codes.OK:
            _raise_api_error(response, endpoint)

        result = None
        if raw_result := response.headers.get(API_RESULT_HEADER):
            result = _decode_object(raw_result, endpoint, source=API_RESULT_HEADER)
        else:
            logger.debug("No result header in content response", endpoint=endpoint)

        return result, response.content

    async def _send(
        self,
        endpoint: str,
        headers: dict[str, str],
        body: bytes | None,
        *,
        deadline: float | None,
        shape: str,
    ) -> httpx.Response:
        """POST and read the whole body; the stream is closed on every exit path."""
        logger.debug(
            "Sending request",
            endpoint=endpoint,
            shape=shape,
            headers=sanitize_headers(headers),
        )
        try:
            async with asyncio.timeout(deadline):
                async with self._client.stream(
                    "POST", endpoint, content=body, headers=headers
                ) as response:
                    await response.aread()
        except TimeoutError as e:
            msg = "Request cancelled: deadline expired"
            raise RequestCancelledError(msg, deadline=deadline, endpoint=endpoint) from e
        except httpx.TransportError as e:
            msg = f"Request failed: {e}"
            raise TransportError(msg, endpoint=endpoint) from e

        logger.debug(
            "Received response",
            endpoint=endpoint,
            status_code=response.status_code,
            size=len(response.content),
        )
        return response


def _encode_arg(arg: Mapping[str, Any], endpoint: str) -> str:
    try:
        return json.dumps(arg)
    except (TypeError, ValueError) as e:
        msg = f"Cannot serialize request argument: {e}"
        raise EncodingError(msg, endpoint=endpoint) from e


def _decode_object(raw: bytes | str, endpoint: str, *, source: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise EncodingError("Invalid JSON response from API", endpoint=endpoint, source=source) from e
    if not isinstance(data, dict):
        raise EncodingError(
            "Expected a JSON object from API",
            endpoint=endpoint,
            source=source,
            got=type(data).__name__,
        )
    return data


def _raise_api_error(response: httpx.Response, endpoint: str) -> None:
    try:
        data = json.loads(response.content)
    except ValueError as e:
        raise EncodingError(
            "Invalid error response from API",
            status_code=response.status_code,
            endpoint=endpoint,
        ) from e

    if not isinstance(data, dict):
        raise EncodingError(
            "Error response is not a JSON object",
            status_code=response.status_code,
            endpoint=endpoint,
        )

    summary = data.get("error_summary") or ""
    metadata = data.get("error") or {}
    if not isinstance(summary, str) or not isinstance(metadata, dict):
        raise EncodingError(
            "Malformed error response from API",
            status_code=response.status_code,
            endpoint=endpoint,
        )
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in metadata.items()):
        raise EncodingError(
            "Error metadata must map strings to strings",
            status_code=response.status_code,
            endpoint=endpoint,
        )

    logger.warning(
        "API returned an error",
        endpoint=endpoint,
        status_code=response.status_code,
        summary=summary,
    )
    raise RemoteError(summary, metadata, status_code=response.status_code, endpoint=endpoint)
