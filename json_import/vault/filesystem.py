from pathlib import Path, PurePosixPath

from json_import.vault.base import BaseVault
from json_import.vault.exceptions import DocumentWriteError, FolderExistsError, VaultError
from json_import.vault.models import VaultDocument


class FileSystemVault(BaseVault):
    """Stores notes as UTF-8 files below a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    def create_folder(self, path: str) -> None:
        folder = self._resolve(path)
        try:
            folder.mkdir(parents=True, exist_ok=False)
        except FileExistsError as exc:
            raise FolderExistsError(f"Folder already exists: {path}") from exc
        except OSError as exc:
            raise VaultError(f"Failed to create folder '{path}': {exc}") from exc

    def get_by_path(self, path: str) -> VaultDocument | None:
        target = self._resolve(path)
        try:
            found = target.is_file()
        except OSError as exc:
            raise VaultError(f"Failed to look up '{path}': {exc}") from exc
        return VaultDocument(path=path) if found else None

    def delete(self, document: VaultDocument) -> None:
        try:
            self._resolve(document.path).unlink()
        except OSError as exc:
            raise DocumentWriteError(f"Failed to delete '{document.path}': {exc}") from exc

    def create(self, path: str, text: str) -> VaultDocument:
        target = self._resolve(path)
        try:
            with target.open("x", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except FileExistsError as exc:
            raise DocumentWriteError(f"Note already exists: {path}") from exc
        except OSError as exc:
            raise DocumentWriteError(f"Failed to create '{path}': {exc}") from exc
        return VaultDocument(path=path)

    def _resolve(self, path: str) -> Path:
        if "\x00" in path:
            raise VaultError(f"Invalid vault path '{path}': embedded null byte")
        relative = PurePosixPath(path.lstrip("/"))
        try:
            resolved = (self._root / relative).resolve()
        except (OSError, ValueError) as exc:
            raise VaultError(f"Invalid vault path '{path}': {exc}") from exc
        if resolved != self._root and self._root not in resolved.parents:
            raise VaultError(f"Path escapes the vault: {path}")
        return resolved
