"""
Base model and JSON decoding shared by every Livy entity.

Fields are individually optional: a missing key decodes to None. Type
checking is strict, so a present field that does not fit its declared type
fails the whole decode.
"""

from typing import Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from livy_client.errors import DecodeError

M = TypeVar("M", bound="LivyModel")

ROOT = "$"


class LivyModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        populate_by_name=True,
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class LivyRequestBody(LivyModel):
    """Outbound request bodies omit unset optional fields."""

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


def format_path(loc: tuple[Union[int, str], ...]) -> str:
    path = ROOT
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _error_reason(error: dict[str, Any]) -> str:
    if error["type"] == "enum":
        return f"unrecognized literal, {error['msg'][0].lower()}{error['msg'][1:]}"
    return error["msg"]


def decode(model: type[M], body: Union[str, bytes]) -> M:
    """Decode a raw JSON body into `model`, raising DecodeError on failure."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        first = e.errors(include_url=False)[0]
        literal = first.get("input")
        if first["type"] == "json_invalid" or not isinstance(literal, (str, int, float, bool)):
            literal = None
        raise DecodeError(format_path(tuple(first["loc"])), _error_reason(first), literal) from e
