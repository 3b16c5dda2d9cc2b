from abc import ABC, abstractmethod

from json_import.vault.models import VaultDocument


class BaseVault(ABC):
    """Contract for note storage backends.

    Paths are vault-relative and use '/' as separator.
    """

    @abstractmethod
    def create_folder(self, path: str) -> None:
        """Create a folder, including missing parents.

        Raises:
            FolderExistsError: if the folder already exists.
            VaultError: on any other failure.
        """

    @abstractmethod
    def get_by_path(self, path: str) -> VaultDocument | None:
        """Return the note at path, or None if there is none."""

    @abstractmethod
    def delete(self, document: VaultDocument) -> None:
        """Delete a note.

        Raises:
            DocumentWriteError: if the note cannot be removed.
        """

    @abstractmethod
    def create(self, path: str, text: str) -> VaultDocument:
        """Create a new note with the given content.

        Raises:
            DocumentWriteError: if the note exists already or cannot be written.
        """
