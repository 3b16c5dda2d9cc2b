from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    vault_root: Path = Path(".")
    settings_file: Path = Path(".json-import/data.json")

    write_timeout_seconds: float = Field(default=10.0, gt=0)

    def resolved_settings_file(self) -> Path:
        """Settings file path, relative paths anchored at the vault root."""
        if self.settings_file.is_absolute():
            return self.settings_file
        return self.vault_root / self.settings_file
