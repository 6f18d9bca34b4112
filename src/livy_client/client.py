"""
Livy / AsyncLivy: main client entry points.
"""

import asyncio
from typing import Any, Optional

import httpx

from livy_client.batches import BatchesAPI
from livy_client.models.batch import Batch, Batches, BatchStateEnvelope, NewBatchRequest
from livy_client.models.session import (
    LogEnvelope,
    NewSessionRequest,
    Session,
    SessionKind,
    Sessions,
    SessionStateEnvelope,
)
from livy_client.models.statement import Ack, Statement, Statements
from livy_client.sessions import SessionsAPI
from livy_client.statements import StatementsAPI
from livy_client.transport.http import DEFAULT_TIMEOUT, HttpClient
from livy_client.transport.request import RequestBuilder


class AsyncLivy:
    """Async Livy client (primary).

    Holds only immutable configuration and the httpx connection pool, so one
    instance can serve concurrent coroutines. Every call is a single round
    trip that returns a fresh snapshot.
    """

    def __init__(
        self,
        url: str,
        negotiate_auth: bool = False,
        username: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        netrc_file: Optional[str] = None,
    ):
        self.builder = RequestBuilder(url, negotiate_auth=negotiate_auth, username=username)
        self.http = HttpClient(timeout=timeout, transport=transport, netrc_file=netrc_file)
        # A missing kerberos extra fails here, and netrc is read once.
        self.http.auth_for(self.builder.auth, httpx.URL(self.builder.base_url).host)
        self.sessions = SessionsAPI(self.http, self.builder)
        self.statements = StatementsAPI(self.http, self.builder)
        self.batches = BatchesAPI(self.http, self.builder)

    @property
    def url(self) -> str:
        return self.builder.base_url

    async def list_sessions(self, from_: Optional[int] = None, size: Optional[int] = None) -> Sessions:
        return await self.sessions.list(from_, size)

    async def get_session(self, session_id: int) -> Session:
        return await self.sessions.get(session_id)

    async def get_session_state(self, session_id: int) -> SessionStateEnvelope:
        return await self.sessions.state(session_id)

    async def delete_session(self, session_id: int) -> None:
        await self.sessions.delete(session_id)

    async def get_session_logs(
        self, session_id: int, from_: Optional[int] = None, size: Optional[int] = None,
    ) -> LogEnvelope:
        return await self.sessions.log(session_id, from_, size)

    async def create_session(self, request: NewSessionRequest) -> Session:
        return await self.sessions.create(request)

    async def list_statements(self, session_id: int) -> Statements:
        return await self.statements.list(session_id)

    async def get_statement(self, session_id: int, statement_id: int) -> Statement:
        return await self.statements.get(session_id, statement_id)

    async def run_statement(self, session_id: int, code: str, kind: Optional[SessionKind] = None) -> Statement:
        return await self.statements.run(session_id, code, kind)

    async def cancel_statement(self, session_id: int, statement_id: int) -> Ack:
        return await self.statements.cancel(session_id, statement_id)

    async def list_batches(self, from_: Optional[int] = None, size: Optional[int] = None) -> Batches:
        return await self.batches.list(from_, size)

    async def get_batch(self, batch_id: int) -> Batch:
        return await self.batches.get(batch_id)

    async def get_batch_state(self, batch_id: int) -> BatchStateEnvelope:
        return await self.batches.state(batch_id)

    async def delete_batch(self, batch_id: int) -> None:
        await self.batches.delete(batch_id)

    async def get_batch_logs(self, batch_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> LogEnvelope:
        return await self.batches.log(batch_id, from_, size)

    async def create_batch(self, request: NewBatchRequest) -> Batch:
        return await self.batches.create(request)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncLivy":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class Livy:
    """Sync wrapper around AsyncLivy. Runs a private event loop, one thread per instance."""

    def __init__(self, url: str, **kwargs: Any):
        self._async = AsyncLivy(url, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def url(self) -> str:
        return self._async.url

    def list_sessions(self, from_: Optional[int] = None, size: Optional[int] = None) -> Sessions:
        return self._run(self._async.list_sessions(from_, size))

    def get_session(self, session_id: int) -> Session:
        return self._run(self._async.get_session(session_id))

    def get_session_state(self, session_id: int) -> SessionStateEnvelope:
        return self._run(self._async.get_session_state(session_id))

    def delete_session(self, session_id: int) -> None:
        self._run(self._async.delete_session(session_id))

    def get_session_logs(self, session_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> LogEnvelope:
        return self._run(self._async.get_session_logs(session_id, from_, size))

    def create_session(self, request: NewSessionRequest) -> Session:
        return self._run(self._async.create_session(request))

    def list_statements(self, session_id: int) -> Statements:
        return self._run(self._async.list_statements(session_id))

    def get_statement(self, session_id: int, statement_id: int) -> Statement:
        return self._run(self._async.get_statement(session_id, statement_id))

    def run_statement(self, session_id: int, code: str, kind: Optional[SessionKind] = None) -> Statement:
        return self._run(self._async.run_statement(session_id, code, kind))

    def cancel_statement(self, session_id: int, statement_id: int) -> Ack:
        return self._run(self._async.cancel_statement(session_id, statement_id))

    def list_batches(self, from_: Optional[int] = None, size: Optional[int] = None) -> Batches:
        return self._run(self._async.list_batches(from_, size))

    def get_batch(self, batch_id: int) -> Batch:
        return self._run(self._async.get_batch(batch_id))

    def get_batch_state(self, batch_id: int) -> BatchStateEnvelope:
        return self._run(self._async.get_batch_state(batch_id))

    def delete_batch(self, batch_id: int) -> None:
        self._run(self._async.delete_batch(batch_id))

    def get_batch_logs(self, batch_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> LogEnvelope:
        return self._run(self._async.get_batch_logs(batch_id, from_, size))

    def create_batch(self, request: NewBatchRequest) -> Batch:
        return self._run(self._async.create_batch(request))

    def close(self) -> None:
        try:
            self._run(self._async.close())
        finally:
            self._loop.close()

    def __enter__(self) -> "Livy":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
