"""Basic unit tests for livy-client package."""

from livy_client import (
    AsyncLivy,
    Livy,
    LivyError,
    TransportError,
    UnexpectedStatus,
    DecodeError,
    SessionKind,
    SessionState,
    StatementState,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert Livy is not None
    assert AsyncLivy is not None


def test_error_hierarchy():
    assert issubclass(TransportError, LivyError)
    assert issubclass(UnexpectedStatus, LivyError)
    assert issubclass(DecodeError, LivyError)


def test_error_attributes():
    err = LivyError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    status = UnexpectedStatus(404, body="not found", method="GET", url="http://h/sessions/5")
    assert status.code == "unexpected_status"
    assert status.status_code == 404
    assert status.body == "not found"
    assert status.accepted == frozenset({200})
    assert "404" in str(status)

    decode = DecodeError("$.kind", "unrecognized literal", "unknown-engine")
    assert decode.code == "decode_error"
    assert decode.path == "$.kind"
    assert decode.literal == "unknown-engine"
    assert "unknown-engine" in str(decode)


def test_transport_error_keeps_cause():
    cause = OSError("connection refused")
    err = TransportError(cause, "GET", "http://h/sessions")
    assert err.code == "transport_error"
    assert err.cause is cause
    assert "connection refused" in str(err)


def test_enum_literals():
    assert SessionKind.PYSPARK == "pyspark"
    assert SessionState.NOT_STARTED == "not_started"
    assert StatementState.CANCELLED == "cancelled"


def test_terminal_states():
    assert SessionState.DEAD.is_terminal
    assert SessionState.SUCCESS.is_terminal
    assert not SessionState.IDLE.is_terminal
    assert not SessionState.STARTING.is_terminal
    assert StatementState.AVAILABLE.is_terminal
    assert StatementState.CANCELLED.is_terminal
    assert not StatementState.CANCELLING.is_terminal
    assert not StatementState.WAITING.is_terminal
