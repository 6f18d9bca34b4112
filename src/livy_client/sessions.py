"""
Sessions REST API: /sessions.
"""

from __future__ import annotations

from typing import Optional

from livy_client.models.session import (
    LogEnvelope,
    NewSessionRequest,
    Session,
    Sessions,
    SessionStateEnvelope,
)
from livy_client.transport.http import HttpClient
from livy_client.transport.request import RequestBuilder, non_negative, pagination
from livy_client.transport.response import CREATED


def session_path(session_id: int) -> str:
    return f"/sessions/{non_negative('session_id', session_id)}"


class SessionsAPI:
    def __init__(self, http: HttpClient, builder: RequestBuilder):
        self._http = http
        self._builder = builder

    async def list(self, from_: Optional[int] = None, size: Optional[int] = None) -> Sessions:
        """List sessions: GET /sessions"""
        return await self._http.fetch(self._builder.build("GET", "/sessions", pagination(from_, size)), Sessions)

    async def get(self, session_id: int) -> Session:
        """Get session: GET /sessions/{id}"""
        return await self._http.fetch(self._builder.build("GET", session_path(session_id)), Session)

    async def state(self, session_id: int) -> SessionStateEnvelope:
        """Get session state: GET /sessions/{id}/state"""
        return await self._http.fetch(
            self._builder.build("GET", f"{session_path(session_id)}/state"), SessionStateEnvelope,
        )

    async def delete(self, session_id: int) -> None:
        """Kill session: DELETE /sessions/{id}"""
        await self._http.acknowledge(self._builder.build("DELETE", session_path(session_id)))

    async def log(self, session_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> LogEnvelope:
        """Get log lines: GET /sessions/{id}/log"""
        return await self._http.fetch(
            self._builder.build("GET", f"{session_path(session_id)}/log", pagination(from_, size)), LogEnvelope,
        )

    async def create(self, request: NewSessionRequest) -> Session:
        """Create session: POST /sessions. Livy answers 201 Created."""
        return await self._http.fetch(
            self._builder.build("POST", "/sessions", body=request.to_body()), Session, CREATED,
        )
