"""Typed view of the JSON body returned by the K1NG send endpoint."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .exceptions import DecodeError


def _field(data: Dict[str, Any], key: str, expected: type, default):
    """Read key from data, returning default for a missing or null value.

    Raises DecodeError when the value has another JSON type. bool is not
    accepted where an int is expected.
    """
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise DecodeError(f"Expected {expected.__name__} for '{key}', got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Result:
    """Outcome for a single destination"""

    id: str = ""
    status_code: str = ""
    status_message: str = ""
    destination: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Result":
        if not isinstance(data, dict):
            raise DecodeError(f"Expected an object in 'data', got {type(data).__name__}")
        return cls(
            id=_field(data, "id_message", str, ""),
            status_code=_field(data, "status_code", str, ""),
            status_message=_field(data, "status_message", str, ""),
            destination=_field(data, "destination", str, ""),
        )


@dataclass(frozen=True)
class Response:
    """Decoded API response"""

    code: int = 0
    message: str = ""
    count: int = 0
    results: List[Result] = field(default_factory=list)
    has_errors: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Response":
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")

        return cls(
            code=_field(data, "status", int, 0),
            message=_field(data, "message", str, ""),
            count=_field(data, "count", int, 0),
            results=[Result.from_dict(item) for item in _field(data, "data", list, [])],
            has_errors=_field(data, "errors", bool, False),
        )

    @classmethod
    def from_json(cls, text: str) -> "Response":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise DecodeError(f"Malformed JSON response: {e}") from e
        return cls.from_dict(data)
