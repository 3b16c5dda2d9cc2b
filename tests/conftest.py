from pathlib import Path
from unittest.mock import MagicMock

import pytest

from json_import.notifications.base import BaseNotifier
from json_import.vault.filesystem import FileSystemVault


@pytest.fixture()
def vault_root(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture()
def vault(vault_root: Path) -> FileSystemVault:
    return FileSystemVault(vault_root)


@pytest.fixture()
def notifier() -> MagicMock:
    return MagicMock(spec=BaseNotifier)
