import re
from collections.abc import Mapping
from typing import Any

from json_import.stringify import to_text

NOTE_EXTENSION = "md"
MISSING_NAME = "undefined"

_RESERVED_CHARACTERS = re.compile(r'[<>:"/\\|?*]')


def sanitize_name(name: str) -> str:
    """Replace every character that is not allowed in a note name with '_'."""
    return _RESERVED_CHARACTERS.sub("_", name)


def derive_name(record: Any, name_field: str) -> str:
    """Best-effort note name for a record; never raises.

    A missing field yields "undefined" so the note is still written and the
    problem is visible in the vault.
    """
    if not isinstance(record, Mapping) or name_field not in record:
        return MISSING_NAME
    return to_text(record[name_field])


def note_path(folder: str, name: str) -> str:
    """Build the vault path: {folder}/{name}.md, or {name}.md for the root."""
    folder = folder.strip("/")
    filename = f"{name}.{NOTE_EXTENSION}"
    if not folder:
        return filename
    return f"{folder}/{filename}"


def target_path(record: Any, name_field: str, folder: str) -> str:
    return note_path(folder, sanitize_name(derive_name(record, name_field)))
