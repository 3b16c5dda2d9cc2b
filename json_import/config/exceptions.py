class SettingsStoreError(Exception):
    """Raised when the conversion settings cannot be saved."""
