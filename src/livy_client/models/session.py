"""
Session models: GET /sessions, /sessions/{id}, /sessions/{id}/state, /sessions/{id}/log.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from livy_client.models.base import LivyModel, LivyRequestBody


class SessionKind(str, Enum):
    SPARK = "spark"
    PYSPARK = "pyspark"
    PYSPARK3 = "pyspark3"
    SPARKR = "sparkr"
    SQL = "sql"
    SHARED = "shared"


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    STARTING = "starting"
    RECOVERING = "recovering"
    IDLE = "idle"
    RUNNING = "running"
    BUSY = "busy"
    SHUTTING_DOWN = "shutting_down"
    ERROR = "error"
    DEAD = "dead"
    KILLED = "killed"
    SUCCESS = "success"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_SESSION_STATES


_TERMINAL_SESSION_STATES = frozenset({
    SessionState.ERROR, SessionState.DEAD, SessionState.KILLED, SessionState.SUCCESS,
})


class Session(LivyModel):
    id: Optional[int] = None
    app_id: Optional[str] = Field(default=None, alias="appId")
    owner: Optional[str] = None
    proxy_user: Optional[str] = Field(default=None, alias="proxyUser")
    kind: Optional[SessionKind] = None
    log: Optional[list[str]] = None
    state: Optional[SessionState] = None
    # A key mapped to None is distinct from a missing key.
    app_info: Optional[dict[str, Optional[str]]] = Field(default=None, alias="appInfo")


class Sessions(LivyModel):
    from_: Optional[int] = Field(default=None, alias="from")
    total: Optional[int] = None
    sessions: Optional[list[Session]] = None

    @property
    def items(self) -> list[Session]:
        return list(self.sessions or [])


class SessionStateEnvelope(LivyModel):
    """GET /sessions/{id}/state: id plus bare state."""
    id: Optional[int] = None
    state: Optional[SessionState] = None


class LogEnvelope(LivyModel):
    """A window of driver log lines, shared by sessions and batches."""
    id: Optional[int] = None
    from_: Optional[int] = Field(default=None, alias="from")
    total: Optional[int] = None
    log: Optional[list[str]] = None


class NewSessionRequest(LivyRequestBody):
    """POST /sessions body."""
    kind: Optional[SessionKind] = None
    proxy_user: Optional[str] = Field(default=None, alias="proxyUser")
    jars: Optional[list[str]] = None
    py_files: Optional[list[str]] = Field(default=None, alias="pyFiles")
    files: Optional[list[str]] = None
    driver_memory: Optional[str] = Field(default=None, alias="driverMemory")
    driver_cores: Optional[int] = Field(default=None, alias="driverCores")
    executor_memory: Optional[str] = Field(default=None, alias="executorMemory")
    executor_cores: Optional[int] = Field(default=None, alias="executorCores")
    num_executors: Optional[int] = Field(default=None, alias="numExecutors")
    archives: Optional[list[str]] = None
    queue: Optional[str] = None
    name: Optional[str] = None
    conf: Optional[dict[str, str]] = None
    heartbeat_timeout_in_second: Optional[int] = Field(default=None, alias="heartbeatTimeoutInSecond")
