"""
Statements REST API: /sessions/{id}/statements.
"""

from __future__ import annotations

from typing import Optional

from livy_client.models.session import SessionKind
from livy_client.models.statement import Ack, RunStatementRequest, Statement, Statements
from livy_client.sessions import session_path
from livy_client.transport.http import HttpClient
from livy_client.transport.request import RequestBuilder, non_negative
from livy_client.transport.response import CREATED


def statement_path(session_id: int, statement_id: int) -> str:
    return f"{session_path(session_id)}/statements/{non_negative('statement_id', statement_id)}"


class StatementsAPI:
    def __init__(self, http: HttpClient, builder: RequestBuilder):
        self._http = http
        self._builder = builder

    async def list(self, session_id: int) -> Statements:
        return await self._http.fetch(
            self._builder.build("GET", f"{session_path(session_id)}/statements"), Statements,
        )

    async def get(self, session_id: int, statement_id: int) -> Statement:
        return await self._http.fetch(self._builder.build("GET", statement_path(session_id, statement_id)), Statement)

    async def run(self, session_id: int, code: str, kind: Optional[SessionKind] = None) -> Statement:
        """Submit code. The returned statement is usually still waiting;
        poll get() for completion."""
        body = RunStatementRequest(code=code, kind=kind).to_body()
        return await self._http.fetch(
            self._builder.build("POST", f"{session_path(session_id)}/statements", body=body), Statement, CREATED,
        )

    async def cancel(self, session_id: int, statement_id: int) -> Ack:
        return await self._http.acknowledge(
            self._builder.build("POST", f"{statement_path(session_id, statement_id)}/cancel"),
        )
