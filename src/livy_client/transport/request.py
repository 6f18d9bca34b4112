"""
Request builder: turns an operation into a fully-formed request descriptor.

No network I/O happens here. Authentication is carried as an AuthSettings
descriptor and resolved by the transport (see transport/auth.py).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    # Livy's CSRF filter rejects POST/DELETE without this header.
    "X-Requested-By": "livy-client",
    "User-Agent": "livy-client/0.1.0",
}


class AuthSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    negotiate: bool = False
    username: Optional[str] = None


class LivyRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str]
    params: dict[str, int] = {}
    body: Optional[dict[str, Any]] = None
    auth: AuthSettings = AuthSettings()


def remove_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def non_negative(key: str, value: int) -> int:
    """Ids and paging values are unsigned on the server; reject negatives before sending."""
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value


def pagination(from_: Optional[int] = None, size: Optional[int] = None) -> dict[str, int]:
    """Query params for a paged listing; unset values are left out entirely."""
    return {key: non_negative(key, value) for key, value in (("from", from_), ("size", size)) if value is not None}


class RequestBuilder:
    def __init__(self, base_url: str, negotiate_auth: bool = False, username: Optional[str] = None):
        self._base_url = remove_trailing_slash(base_url)
        self._auth = AuthSettings(negotiate=negotiate_auth, username=username)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> AuthSettings:
        return self._auth

    def build(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, int]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> LivyRequest:
        return LivyRequest(
            method=method,
            url=f"{self._base_url}{path}",
            headers=dict(DEFAULT_HEADERS),
            params=params or {},
            body=body,
            auth=self._auth,
        )
