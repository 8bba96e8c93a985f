"""
Shared HTTP transport for every Sia Central endpoint.

A transport sends one request, decodes the JSON envelope and hands back the
status code alongside it. Whether a status code or envelope type means failure
is decided by the calling client through ``ensure_success``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Mapping, NoReturn, Optional, Tuple

import httpx

from siacentral.config import ClientConfig
from siacentral.errors import (
    APIError,
    APITimeoutError,
    APIUnreachableError,
    InvalidResponseError,
    MalformedEnvelopeError,
)

logger = logging.getLogger(__name__)

SUCCESS_TYPE = "success"


@dataclass(frozen=True)
class APIResponse:
    """The ``{type, message, ...payload}`` wrapper every endpoint responds with."""

    type: str = ""
    message: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.type == SUCCESS_TYPE

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    @classmethod
    def from_json(cls, data: Any, *, status_code: Optional[int] = None) -> "APIResponse":
        if not isinstance(data, dict):
            raise MalformedEnvelopeError("Unexpected response from API.", status_code=status_code)
        response_type = data.get("type")
        message = data.get("message")
        if response_type is not None and not isinstance(response_type, str):
            raise MalformedEnvelopeError("Envelope type must be a string.", status_code=status_code)
        if message is not None and not isinstance(message, str):
            raise MalformedEnvelopeError("Envelope message must be a string.", status_code=status_code)
        return cls(type=response_type or "", message=message or "", data=data)


def ensure_success(
    status_code: int, envelope: APIResponse, *, check_type: bool = True
) -> APIResponse:
    """
    Classify a response as success or failure.

    A response fails when the status code is outside [200, 300), or when
    ``check_type`` is set and the envelope type is not ``"success"``. The raised
    APIError carries the envelope message verbatim.
    """
    if status_code < 200 or status_code >= 300 or (check_type and not envelope.is_success):
        raise APIError(envelope.message, status_code=status_code, response_type=envelope.type)
    return envelope


def _json_default(value: Any) -> Any:
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    if isinstance(value, timedelta):
        return (value // timedelta(microseconds=1)) * 1000
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(body: Any) -> bytes:
    return json.dumps(body, default=_json_default).encode("utf-8")


def build_headers(config: ClientConfig, *, has_body: bool) -> Dict[str, str]:
    headers: Dict[str, str] = {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    if has_body:
        headers["Content-Type"] = "application/json"
    if config.api_key:
        headers["X-API-Key"] = config.api_key
    return headers


def _raise_transport_error(exc: httpx.RequestError, method: str, target: str) -> NoReturn:
    if isinstance(exc, httpx.TimeoutException):
        logger.warning("Sia Central API timed out for %s %s", method, target)
        raise APITimeoutError(str(exc) or "Request timed out") from exc
    logger.warning("Sia Central API unreachable for %s %s", method, target)
    raise APIUnreachableError(str(exc) or "API unreachable") from exc


def _process_response(response: httpx.Response, *, method: str, target: str) -> Tuple[int, APIResponse]:
    status_code = response.status_code
    try:
        data = response.json()
    except ValueError as exc:
        raise InvalidResponseError("Response body is not valid JSON.", status_code=status_code) from exc

    envelope = APIResponse.from_json(data, status_code=status_code)
    logger.debug(
        "%s %s -> %s",
        method,
        target,
        status_code,
        extra={"method": method, "target": target, "status_code": status_code},
    )
    return status_code, envelope


class Transport:
    """Blocking transport backed by ``httpx.Client``."""

    def __init__(self, config: ClientConfig, *, http_client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self._client: Optional[httpx.Client] = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(base_url=self.config.base_url, timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def request(
        self,
        method: str,
        target: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Tuple[int, APIResponse]:
        """Send one request and return ``(status_code, envelope)``."""
        client = self._get_client()
        content = encode_body(body) if body is not None else None
        headers = build_headers(self.config, has_body=content is not None)
        try:
            response = client.request(method, target, params=params, content=content, headers=headers)
        except httpx.RequestError as exc:
            _raise_transport_error(exc, method, target)
        return _process_response(response, method=method, target=target)


class AsyncTransport:
    """Asyncio transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self, config: ClientConfig, *, async_client: Optional[httpx.AsyncClient] = None
    ) -> None:
        self.config = config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.config.base_url, timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        target: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Tuple[int, APIResponse]:
        """Send one request and return ``(status_code, envelope)``."""
        client = await self._get_client()
        content = encode_body(body) if body is not None else None
        headers = build_headers(self.config, has_body=content is not None)
        try:
            response = await client.request(
                method, target, params=params, content=content, headers=headers
            )
        except httpx.RequestError as exc:
            _raise_transport_error(exc, method, target)
        return _process_response(response, method=method, target=target)
