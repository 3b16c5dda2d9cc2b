class VaultError(Exception):
    """Base exception for all vault storage errors."""


class FolderExistsError(VaultError):
    """Raised when creating a folder that is already present."""


class DocumentWriteError(VaultError):
    """Raised when a note cannot be created or deleted."""
