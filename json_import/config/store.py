"""Persistence of the last-used conversion parameters."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from json_import.config.exceptions import SettingsStoreError
from json_import.logging.logger import Log


class ConversionSettings(BaseModel):
    """Last-used parameters, stored with the importer's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    json_file: str = Field(default="rewards.json", alias="jsonFile")
    template_file: str = Field(default="rewards.md", alias="templateFile")
    name_field: str = Field(default="name", alias="nameField")
    folder_name: str = Field(default="Rewards", alias="folderName")


class SettingsStore:
    """Loads and saves ConversionSettings as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ConversionSettings:
        """Load stored values merged over the defaults.

        A missing file yields the defaults. An unreadable or invalid file is
        logged and also yields the defaults.
        """
        if not self._path.exists():
            return ConversionSettings()
        try:
            return ConversionSettings.model_validate_json(
                self._path.read_text(encoding="utf-8")
            )
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            Log.warning(f"Ignoring unreadable settings file {self._path}: {exc}")
            return ConversionSettings()

    def save(self, settings: ConversionSettings) -> None:
        """Write settings to disk.

        Raises:
            SettingsStoreError: if the file cannot be written.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                settings.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
        except OSError as exc:
            raise SettingsStoreError(f"Failed to save settings to {self._path}: {exc}") from exc
        Log.debug(f"Saved settings to {self._path}")
