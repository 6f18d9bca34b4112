"""
Livy client error types.

Every failed call raises exactly one of TransportError, UnexpectedStatus or
DecodeError. Nothing is retried inside the client.
"""

from typing import Any, Iterable, Optional


class LivyError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(LivyError):
    """No HTTP response was obtained (connect failure, timeout, DNS, TLS)."""

    def __init__(self, cause: BaseException, method: Optional[str] = None, url: Optional[str] = None):
        target = f" {method} {url}" if method and url else ""
        super().__init__("transport_error", f"Transport failure{target}: {cause}",
                         {"method": method, "url": url})
        self.cause = cause
        self.method = method
        self.url = url


class UnexpectedStatus(LivyError):
    """A response arrived but its status code is not accepted for the operation."""

    def __init__(
        self,
        status_code: int,
        body: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        accepted: Iterable[int] = (200,),
    ):
        message = f"HTTP {status_code}"
        if method and url:
            message += f" from {method} {url}"
        if body:
            message += f": {body[:200]}"
        super().__init__("unexpected_status", message, {"status_code": status_code, "method": method, "url": url})
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.accepted = frozenset(accepted)


class DecodeError(LivyError):
    """The response body does not fit the expected entity shape."""

    def __init__(self, path: str, reason: str, literal: Any = None):
        message = f"Cannot decode {path}: {reason}"
        if literal is not None:
            message += f" (got {literal!r})"
        super().__init__("decode_error", message, {"path": path, "literal": literal})
        self.path = path
        self.reason = reason
        self.literal = literal
