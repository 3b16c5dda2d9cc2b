from json_import.naming.deriver import (
    NOTE_EXTENSION,
    derive_name,
    note_path,
    sanitize_name,
    target_path,
)

__all__ = ["NOTE_EXTENSION", "derive_name", "note_path", "sanitize_name", "target_path"]
