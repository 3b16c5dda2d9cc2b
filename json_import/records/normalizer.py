"""Turns an arbitrary JSON document into an ordered list of records."""

import json
from enum import Enum
from typing import Any

from json_import.records.exceptions import (
    AmbiguousTopLevelError,
    JsonParseError,
    NotAnArrayError,
)

AMBIGUOUS_TOP_LEVEL_MESSAGE = "JSON doesn't have a top-level array"
NOT_AN_ARRAY_MESSAGE = "JSON file does not contain an array"


class JsonShape(Enum):
    ARRAY = "array"
    SINGLE_KEY_OBJECT = "single_key_object"
    OTHER = "other"


def parse_json(text: str) -> Any:
    """Parse JSON text.

    Raises:
        JsonParseError: if the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonParseError(f"Invalid JSON: {exc}") from exc


def classify(value: Any) -> tuple[JsonShape, Any]:
    """Classify a parsed JSON value.

    Returns the shape together with its payload: the list itself for
    ARRAY, the wrapped value for SINGLE_KEY_OBJECT and None for OTHER.
    """
    if isinstance(value, list):
        return JsonShape.ARRAY, value
    if isinstance(value, dict) and len(value) == 1:
        return JsonShape.SINGLE_KEY_OBJECT, next(iter(value.values()))
    return JsonShape.OTHER, None


def normalize(value: Any) -> list[Any]:
    """Resolve the record list of a parsed JSON document.

    A bare array is the record list. An object with exactly one key is
    unwrapped once and its value must be an array.

    Raises:
        AmbiguousTopLevelError: top level is a scalar or an object whose key
            count is not exactly one.
        NotAnArrayError: the single key does not hold an array.
    """
    shape, payload = classify(value)
    if shape is JsonShape.ARRAY:
        return payload
    if shape is JsonShape.OTHER:
        raise AmbiguousTopLevelError(AMBIGUOUS_TOP_LEVEL_MESSAGE)
    if not isinstance(payload, list):
        raise NotAnArrayError(NOT_AN_ARRAY_MESSAGE)
    return payload
