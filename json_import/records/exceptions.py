class RecordsError(Exception):
    """Base exception for reading the record list out of a JSON document."""


class JsonParseError(RecordsError):
    """Raised when the JSON document is malformed."""


class AmbiguousTopLevelError(RecordsError):
    """Raised when the top level is neither an array nor a single-key object."""


class NotAnArrayError(RecordsError):
    """Raised when the value wrapped by a single-key object is not an array."""
