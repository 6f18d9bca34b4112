"""
Batch models: GET /batches, /batches/{id}, /batches/{id}/state.

Batch log windows reuse LogEnvelope from the session models.
"""

from typing import Optional

from pydantic import Field

from livy_client.models.base import LivyModel, LivyRequestBody
from livy_client.models.session import SessionState


class Batch(LivyModel):
    id: Optional[int] = None
    app_id: Optional[str] = Field(default=None, alias="appId")
    app_info: Optional[dict[str, Optional[str]]] = Field(default=None, alias="appInfo")
    log: Optional[list[str]] = None
    state: Optional[SessionState] = None


class Batches(LivyModel):
    from_: Optional[int] = Field(default=None, alias="from")
    total: Optional[int] = None
    # Livy lists batches under the "sessions" key.
    batches: Optional[list[Batch]] = Field(default=None, alias="sessions")

    @property
    def items(self) -> list[Batch]:
        return list(self.batches or [])


class BatchStateEnvelope(LivyModel):
    id: Optional[int] = None
    state: Optional[SessionState] = None


class NewBatchRequest(LivyRequestBody):
    """POST /batches body."""
    file: str
    proxy_user: Optional[str] = Field(default=None, alias="proxyUser")
    class_name: Optional[str] = Field(default=None, alias="className")
    args: Optional[list[str]] = None
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
