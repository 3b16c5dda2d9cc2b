from json_import.vault.exceptions import VaultError


class SourceReadError(Exception):
    """Raised when a source document cannot be read."""


class WriteTimeoutError(VaultError):
    """Raised when the vault does not finish a write within the timeout."""
