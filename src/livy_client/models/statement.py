"""
Statement models: GET /sessions/{id}/statements and /sessions/{id}/statements/{sid}.
"""

from enum import Enum
from typing import Any, Optional

from livy_client.models.base import LivyModel, LivyRequestBody
from livy_client.models.session import SessionKind


class StatementState(str, Enum):
    WAITING = "waiting"
    RUNNING = "running"
    AVAILABLE = "available"
    ERROR = "error"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (StatementState.AVAILABLE, StatementState.ERROR, StatementState.CANCELLED)


class OutputStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class StatementOutput(LivyModel):
    """Result of a finished statement.

    On success `data` maps MIME type to the rendered value (a string for
    text/plain, an object for application/json). On failure `ename`,
    `evalue` and `traceback` describe the error instead.
    """
    status: Optional[OutputStatus] = None
    execution_count: Optional[int] = None
    data: Optional[dict[str, Any]] = None
    ename: Optional[str] = None
    evalue: Optional[str] = None
    traceback: Optional[list[str]] = None

    @property
    def is_error(self) -> bool:
        return self.status == OutputStatus.ERROR


class Statement(LivyModel):
    id: Optional[int] = None
    code: Optional[str] = None
    state: Optional[StatementState] = None
    output: Optional[StatementOutput] = None
    progress: Optional[float] = None


class Statements(LivyModel):
    total_statements: Optional[int] = None
    statements: Optional[list[Statement]] = None

    @property
    def items(self) -> list[Statement]:
        return list(self.statements or [])


class RunStatementRequest(LivyRequestBody):
    """POST /sessions/{id}/statements body."""
    code: str
    # Only honoured by "shared" sessions.
    kind: Optional[SessionKind] = None


class Ack(LivyModel):
    """Acknowledgement body of DELETE and cancel calls, e.g. {"msg": "deleted"}."""
    msg: Optional[str] = None
