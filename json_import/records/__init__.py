from json_import.records.exceptions import (
    AmbiguousTopLevelError,
    JsonParseError,
    NotAnArrayError,
    RecordsError,
)
from json_import.records.normalizer import JsonShape, classify, normalize, parse_json

__all__ = [
    "AmbiguousTopLevelError",
    "JsonParseError",
    "JsonShape",
    "NotAnArrayError",
    "RecordsError",
    "classify",
    "normalize",
    "parse_json",
]
