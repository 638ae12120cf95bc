"""
Strict JSON request body decoding.

A body must hold exactly one JSON object whose keys all belong to the
target model and whose values have the declared JSON types. Each failure
becomes a DecodeFailed with a client-facing message.
"""

import json
from typing import Any, Callable, Coroutine, Dict, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from sueta.core.exceptions import DecodeFailed

M = TypeVar("M", bound=BaseModel)

_decoder = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


def _skip_whitespace(text: str, index: int) -> int:
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    return index


def _badly_formatted(offset: int) -> DecodeFailed:
    return DecodeFailed(f"request body contains badly-formatted JSON (at character {offset})")


def _first_field_error(value: Dict[str, Any], exc: ValidationError, offset: int) -> DecodeFailed:
    """Report the first offending key in document order."""
    unknown = set()
    mistyped = set()
    for error in exc.errors():
        if not error["loc"]:
            continue
        key = error["loc"][0]
        if error["type"] == "extra_forbidden":
            unknown.add(key)
        else:
            mistyped.add(key)

    for key in value:
        if key in unknown:
            return DecodeFailed(f'request body contains unknown key "{key}"')
        if key in mistyped:
            return DecodeFailed(f'request body contains incorrect JSON type for field "{key}"')
    return DecodeFailed(f"request body contains incorrect JSON type (at character {offset})")


def decode_json_body(raw: bytes, model: Type[M]) -> M:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _badly_formatted(exc.start) from exc

    start = _skip_whitespace(text, 0)
    if start == len(text):
        raise DecodeFailed("request body must not be empty")

    try:
        value, end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError as exc:
        raise _badly_formatted(exc.pos) from exc

    if _skip_whitespace(text, end) != len(text):
        raise DecodeFailed("request body must only contain single JSON value")

    if not isinstance(value, dict):
        raise DecodeFailed(f"request body contains incorrect JSON type (at character {end})")

    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise _first_field_error(value, exc, end) from exc


def json_body(model: Type[M], developer_message: str) -> Callable[[Request], Coroutine[Any, Any, M]]:
    """Build a dependency that decodes the request body into ``model``."""

    async def read_body(request: Request) -> M:
        raw = await request.body()
        try:
            return decode_json_body(raw, model)
        except DecodeFailed as exc:
            raise DecodeFailed(exc.message, developer_message) from exc

    return read_body
