"""Text conversion of JSON values shared by note bodies and note names.

Values are converted close to the way JavaScript's ``String()`` would, so
templates written for JavaScript template engines produce the same text.
"""

from typing import Any

UNRESOLVED_MARKER = "[object Object]"


def to_text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        # null members of an array render empty, as Array.prototype.join does
        return ",".join("" if item is None else to_text(item) for item in value)
    return UNRESOLVED_MARKER
