"""
Integration tests for livy-client against a running Livy server.

Requires environment variables:
  LIVY_URL            (optional) defaults to http://localhost:8998
  LIVY_NEGOTIATE      (optional) "1" to use SPNEGO
  LIVY_USERNAME       (optional) basic-auth user, password from ~/.netrc

Run: LIVY_INTEGRATION=1 pytest tests/integration/ -v
"""

import asyncio
import os

import pytest

from livy_client import AsyncLivy, UnexpectedStatus
from livy_client.models import NewSessionRequest, SessionKind, SessionState, StatementState

SKIP = not os.environ.get("LIVY_INTEGRATION")
URL = os.environ.get("LIVY_URL", "http://localhost:8998")
NEGOTIATE = os.environ.get("LIVY_NEGOTIATE", "") in ("1", "true", "yes")
USERNAME = os.environ.get("LIVY_USERNAME") or None

pytestmark = pytest.mark.skipif(SKIP, reason="LIVY_INTEGRATION not set")

SESSION_START_TIMEOUT = 300
STATEMENT_TIMEOUT = 120


def make_client() -> AsyncLivy:
    return AsyncLivy(URL, negotiate_auth=NEGOTIATE, username=USERNAME)


async def wait_for_session(client: AsyncLivy, session_id: int, timeout: float = SESSION_START_TIMEOUT) -> SessionState:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while True:
        state = (await client.get_session_state(session_id)).state
        if state is SessionState.IDLE or (state and state.is_terminal) or loop.time() > deadline:
            return state
        await asyncio.sleep(2)


class TestReadOnly:
    @pytest.mark.asyncio
    async def test_list_sessions(self):
        async with make_client() as client:
            result = await client.list_sessions(0, 10)
        assert result.total is not None
        assert len(result.items) <= 10

    @pytest.mark.asyncio
    async def test_list_batches(self):
        async with make_client() as client:
            result = await client.list_batches()
        assert result.total is not None

    @pytest.mark.asyncio
    async def test_missing_session_is_404(self):
        async with make_client() as client:
            with pytest.raises(UnexpectedStatus) as exc_info:
                await client.get_session(2_000_000_000)
        assert exc_info.value.status_code == 404


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_create_run_cancel_delete(self):
        async with make_client() as client:
            session = await client.create_session(NewSessionRequest(kind=SessionKind.PYSPARK, name="livy-client-it"))
            assert session.id is not None
            try:
                assert await wait_for_session(client, session.id) is SessionState.IDLE

                statement = await client.run_statement(session.id, "1 + 1")
                loop = asyncio.get_running_loop()
                deadline = loop.time() + STATEMENT_TIMEOUT
                while not (statement.state and statement.state.is_terminal) and loop.time() < deadline:
                    await asyncio.sleep(1)
                    statement = await client.get_statement(session.id, statement.id)
                assert statement.state is StatementState.AVAILABLE
                assert statement.output.data["text/plain"] == "2"

                listed = await client.list_statements(session.id)
                assert statement.id in [s.id for s in listed.items]

                slow = await client.run_statement(session.id, "import time; time.sleep(60)")
                ack = await client.cancel_statement(session.id, slow.id)
                assert ack is not None

                log = await client.get_session_logs(session.id, size=20)
                assert log.log is not None
            finally:
                await client.delete_session(session.id)
