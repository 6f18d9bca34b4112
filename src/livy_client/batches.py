"""
Batches REST API: /batches.
"""

from __future__ import annotations

from typing import Optional

from livy_client.models.batch import Batch, Batches, BatchStateEnvelope, NewBatchRequest
from livy_client.models.session import LogEnvelope
from livy_client.transport.http import HttpClient
from livy_client.transport.request import RequestBuilder, non_negative, pagination
from livy_client.transport.response import CREATED


def batch_path(batch_id: int) -> str:
    return f"/batches/{non_negative('batch_id', batch_id)}"


class BatchesAPI:
    def __init__(self, http: HttpClient, builder: RequestBuilder):
        self._http = http
        self._builder = builder

    async def list(self, from_: Optional[int] = None, size: Optional[int] = None) -> Batches:
        return await self._http.fetch(self._builder.build("GET", "/batches", pagination(from_, size)), Batches)

    async def get(self, batch_id: int) -> Batch:
        return await self._http.fetch(self._builder.build("GET", batch_path(batch_id)), Batch)

    async def state(self, batch_id: int) -> BatchStateEnvelope:
        return await self._http.fetch(self._builder.build("GET", f"{batch_path(batch_id)}/state"), BatchStateEnvelope)

    async def delete(self, batch_id: int) -> None:
        await self._http.acknowledge(self._builder.build("DELETE", batch_path(batch_id)))

    async def log(self, batch_id: int, from_: Optional[int] = None, size: Optional[int] = None) -> LogEnvelope:
        return await self._http.fetch(
            self._builder.build("GET", f"{batch_path(batch_id)}/log", pagination(from_, size)), LogEnvelope,
        )

    async def create(self, request: NewBatchRequest) -> Batch:
        """Submit a batch job: POST /batches"""
        return await self._http.fetch(self._builder.build("POST", "/batches", body=request.to_body()), Batch, CREATED)
