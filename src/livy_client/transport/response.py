"""
Response interpreter: status check first, then a typed decode of the body.
"""

import json
import logging
from typing import Iterable, Optional, TypeVar

from livy_client.errors import DecodeError, UnexpectedStatus
from livy_client.models.base import LivyModel, decode
from livy_client.models.statement import Ack

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=LivyModel)

OK = frozenset({200})
CREATED = frozenset({200, 201})

BODY_SNIPPET_LIMIT = 1000


def body_text(body: bytes) -> Optional[str]:
    try:
        return body.decode("utf-8")[:BODY_SNIPPET_LIMIT]
    except UnicodeDecodeError:
        return None


def check_status(
    status_code: int,
    body: bytes,
    accepted: Iterable[int] = OK,
    method: Optional[str] = None,
    url: Optional[str] = None,
) -> None:
    accepted = frozenset(accepted)
    if status_code not in accepted:
        logger.debug("%s %s answered %d, expected one of %s", method, url, status_code, sorted(accepted))
        raise UnexpectedStatus(status_code, body_text(body), method, url, accepted)


def interpret(
    status_code: int,
    body: bytes,
    model: type[M],
    accepted: Iterable[int] = OK,
    method: Optional[str] = None,
    url: Optional[str] = None,
) -> M:
    check_status(status_code, body, accepted, method, url)
    try:
        return decode(model, body)
    except DecodeError as e:
        logger.debug("%s %s body rejected as %s: %s", method, url, model.__name__, e)
        raise


def interpret_ack(
    status_code: int,
    body: bytes,
    accepted: Iterable[int] = OK,
    method: Optional[str] = None,
    url: Optional[str] = None,
) -> Ack:
    """Acknowledgements only depend on the status; `msg` is read if it is there."""
    check_status(status_code, body, accepted, method, url)
    try:
        payload = json.loads(body) if body else None
    except (ValueError, UnicodeDecodeError):
        payload = None
    msg = payload.get("msg") if isinstance(payload, dict) else None
    return Ack(msg=msg if isinstance(msg, str) else None)
