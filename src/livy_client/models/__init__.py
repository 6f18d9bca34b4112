from livy_client.models.base import LivyModel, decode
from livy_client.models.batch import Batch, Batches, BatchStateEnvelope, NewBatchRequest
from livy_client.models.session import (
    LogEnvelope,
    NewSessionRequest,
    Session,
    SessionKind,
    Sessions,
    SessionState,
    SessionStateEnvelope,
)
from livy_client.models.statement import (
    Ack,
    OutputStatus,
    RunStatementRequest,
    Statement,
    StatementOutput,
    Statements,
    StatementState,
)

__all__ = [
    "LivyModel",
    "decode",
    "Ack",
    "Batch",
    "Batches",
    "BatchStateEnvelope",
    "LogEnvelope",
    "NewBatchRequest",
    "NewSessionRequest",
    "OutputStatus",
    "RunStatementRequest",
    "Session",
    "SessionKind",
    "Sessions",
    "SessionState",
    "SessionStateEnvelope",
    "Statement",
    "StatementOutput",
    "Statements",
    "StatementState",
]
