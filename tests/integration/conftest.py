import json
from pathlib import Path

import pytest


@pytest.fixture()
def sources(tmp_path: Path) -> Path:
    """Directory holding the JSON data and template used by a run."""
    directory = tmp_path / "sources"
    directory.mkdir()
    return directory


@pytest.fixture()
def rewards_json(sources: Path) -> Path:
    path = sources / "rewards.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Gold Coin", "value": 5},
                {"name": "Old/Sword", "value": 10},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def rewards_template(sources: Path) -> Path:
    path = sources / "rewards.md"
    path.write_text("# {{name}}\nValue: {{value}}", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("VAULT_ROOT", "SETTINGS_FILE", "WRITE_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
