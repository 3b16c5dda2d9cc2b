from json_import.vault.base import BaseVault
from json_import.vault.exceptions import DocumentWriteError, FolderExistsError, VaultError
from json_import.vault.filesystem import FileSystemVault
from json_import.vault.models import VaultDocument

__all__ = [
    "BaseVault",
    "DocumentWriteError",
    "FileSystemVault",
    "FolderExistsError",
    "VaultDocument",
    "VaultError",
]
