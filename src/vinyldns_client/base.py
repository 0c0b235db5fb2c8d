import json
import logging
import os
from typing import Any, Self, TypeVar

import aiohttp
from multidict import CIMultiDict
from yarl import URL

from .auth import AWSSignatureV4, Request
from .canonical import DEFAULT_HEADER_POLICY, HeaderPolicy, ensure_url
from .exceptions import (
    DecodeError,
    MissingCredentialError,
    TransportError,
    VinylDNSClientError,
    VinylDNSNotFoundError,
    VinylDNSServerError,
)
from .models import Model

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Model)


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise MissingCredentialError(name)
    return value


class _VinylDNSClientBase:
    def __init__(
        self,
        access_key: str,
        secret_key: str,
        host: URL | str,
        region: str = "us-east-1",
        service: str = "s3",
        header_policy: HeaderPolicy = DEFAULT_HEADER_POLICY,
    ):
        self.access_key = access_key
        self.secret_key = secret_key
        self.host = ensure_url(host)
        self.region = region
        self.service = service

        self._auth = AWSSignatureV4(
            access_key, secret_key, region, service, header_policy
        )
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_env(cls) -> Self:
        access_key = _require_env("VINYLDNS_ACCESS_KEY")
        secret_key = _require_env("VINYLDNS_SECRET_KEY")
        host = _require_env("VINYLDNS_HOST")
        region = os.environ.get("VINYLDNS_REGION") or "us-east-1"
        service = os.environ.get("VINYLDNS_SERVICE") or "s3"
        return cls(access_key, secret_key, host, region, service)

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self):
        if self._session is None:
            self._session = aiohttp.ClientSession()

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    def _url(self, path: str, params: dict[str, str] | None = None) -> URL:
        url = self.host.with_path(self.host.path.rstrip("/") + path)
        if params:
            url = url.with_query(params)
        return url

    def _build_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> Request:
        headers = CIMultiDict({"Content-Type": "application/json"})
        request = Request(method, self._url(path, params), headers, data or b"")
        self._auth.sign(request)
        return request

    def _parse_error_response(self, status: int, response_text: str) -> Exception:
        message = response_text or f"HTTP status {status}"
        if status == 404:
            return VinylDNSNotFoundError(message)
        elif 400 <= status < 500:
            return VinylDNSClientError(message, status, response_text)
        else:
            return VinylDNSServerError(message, status, response_text)

    async def _make_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> str:
        await self._ensure_session()

        request = self._build_request(method, path, params, data)
        logger.debug("%s %s", request.method, request.url)

        try:
            async with self._session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
            ) as response:
                text = await response.text()
                status = response.status
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as e:
            raise TransportError(f"failed to execute request: {e}") from e

        logger.debug("%s %s -> %d", request.method, request.url, status)
        if not 200 <= status < 300:
            raise self._parse_error_response(status, text)
        return text

    async def _request_model(
        self,
        model: type[M],
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: Model | None = None,
    ) -> M:
        data = json.dumps(body.to_dict()).encode() if body is not None else None
        text = await self._make_request(method, path, params=params, data=data)
        return _decode(model, text)


def _decode(model: type[M], text: str) -> M:
    try:
        payload: Any = json.loads(text)
        return model.from_dict(payload)
    except (ValueError, KeyError, TypeError) as e:
        raise DecodeError(str(e), text) from e
