from pathlib import Path

from json_import.converter.exceptions import SourceReadError
from json_import.converter.models import DocumentKind, SourceDocument


def read_source(path: Path, kind: DocumentKind) -> SourceDocument:
    """Read a source document as UTF-8 text.

    Raises:
        SourceReadError: if the file is missing, unreadable or not UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read {kind.value} file {path}: {exc}") from exc
    return SourceDocument(kind=kind, text=text, path=path)
