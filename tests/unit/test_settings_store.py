import json
from pathlib import Path
from unittest.mock import patch

import pytest

from json_import.config.exceptions import SettingsStoreError
from json_import.config.store import ConversionSettings, SettingsStore


class TestLoad:
    def test_missing_file_yields_defaults(self, tmp_path: Path) -> None:
        settings = SettingsStore(tmp_path / "data.json").load()
        assert settings == ConversionSettings()
        assert settings.json_file == "rewards.json"
        assert settings.template_file == "rewards.md"
        assert settings.name_field == "name"
        assert settings.folder_name == "Rewards"

    def test_stored_values_merge_over_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"nameField": "title", "unknownKey": 1}))
        settings = SettingsStore(path).load()
        assert settings.name_field == "title"
        assert settings.folder_name == "Rewards"

    def test_invalid_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("{not json")
        assert SettingsStore(path).load() == ConversionSettings()

    def test_non_utf8_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_bytes(b"\xff\xfe{")
        assert SettingsStore(path).load() == ConversionSettings()


class TestSave:
    def test_writes_camel_case_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "data.json"
        store = SettingsStore(path)
        store.save(ConversionSettings(name_field="title", folder_name="Cards"))

        stored = json.loads(path.read_text())
        assert stored == {
            "jsonFile": "rewards.json",
            "templateFile": "rewards.md",
            "nameField": "title",
            "folderName": "Cards",
        }

    def test_saved_settings_load_back(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path / "data.json")
        saved = ConversionSettings(json_file="cards.json", folder_name="Cards")
        store.save(saved)
        assert store.load() == saved

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path / "data.json")
        with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
            with pytest.raises(SettingsStoreError, match="denied"):
                store.save(ConversionSettings())
