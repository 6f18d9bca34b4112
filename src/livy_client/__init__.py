"""
livy-client: typed Python client for the Apache Livy REST API.

Interactive Spark sessions, statements and batch jobs over JSON/HTTP,
with optional SPNEGO (Kerberos) authentication.
"""

from livy_client.client import Livy, AsyncLivy
from livy_client.errors import LivyError, TransportError, UnexpectedStatus, DecodeError
from livy_client.models import (
    Ack,
    Batch,
    Batches,
    BatchStateEnvelope,
    LogEnvelope,
    NewBatchRequest,
    NewSessionRequest,
    OutputStatus,
    Session,
    SessionKind,
    Sessions,
    SessionState,
    SessionStateEnvelope,
    Statement,
    StatementOutput,
    Statements,
    StatementState,
)

__version__ = "0.1.0"
__all__ = [
    "Livy",
    "AsyncLivy",
    "LivyError",
    "TransportError",
    "UnexpectedStatus",
    "DecodeError",
    "Ack",
    "Batch",
    "Batches",
    "BatchStateEnvelope",
    "LogEnvelope",
    "NewBatchRequest",
    "NewSessionRequest",
    "OutputStatus",
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
