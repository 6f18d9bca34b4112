"""
HTTP transport for the Livy REST API.

Sends LivyRequest descriptors with httpx and hands the raw status and body
to the response interpreter. Transport failures become TransportError.
"""

import logging
from typing import Iterable, Optional, TypeVar

import httpx

from livy_client.errors import TransportError
from livy_client.models.base import LivyModel
from livy_client.models.statement import Ack
from livy_client.transport.auth import build_auth
from livy_client.transport.request import AuthSettings, LivyRequest
from livy_client.transport.response import OK, interpret, interpret_ack

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=LivyModel)

DEFAULT_TIMEOUT = 30.0


class HttpClient:
    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        netrc_file: Optional[str] = None,
    ):
        self._netrc_file = netrc_file
        self._auth: dict[tuple[AuthSettings, str], Optional[httpx.Auth]] = {}
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def auth_for(self, settings: AuthSettings, host: str) -> Optional[httpx.Auth]:
        """Basic auth is resolved once per settings and host, so netrc is not
        re-read per request. SPNEGO keeps per-handshake state and is built fresh."""
        if settings.negotiate:
            return build_auth(settings, host, self._netrc_file)
        key = (settings, host)
        if key not in self._auth:
            self._auth[key] = build_auth(settings, host, self._netrc_file)
        return self._auth[key]

    async def send(self, request: LivyRequest) -> httpx.Response:
        auth = self.auth_for(request.auth, httpx.URL(request.url).host)
        logger.debug("%s %s params=%s", request.method, request.url, request.params)
        try:
            resp = await self._client.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers,
                json=request.body,
                auth=auth,
            )
        except httpx.RequestError as e:
            raise TransportError(e, request.method, request.url) from e
        logger.debug("%s %s -> %d", request.method, request.url, resp.status_code)
        return resp

    async def fetch(self, request: LivyRequest, model: type[M], accepted: Iterable[int] = OK) -> M:
        resp = await self.send(request)
        return interpret(resp.status_code, resp.content, model, accepted, request.method, request.url)

    async def acknowledge(self, request: LivyRequest, accepted: Iterable[int] = OK) -> Ack:
        resp = await self.send(request)
        return interpret_ack(resp.status_code, resp.content, accepted, request.method, request.url)

    async def close(self) -> None:
        await self._client.aclose()
