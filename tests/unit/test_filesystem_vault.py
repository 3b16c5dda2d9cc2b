from pathlib import Path

import pytest

from json_import.vault import (
    DocumentWriteError,
    FileSystemVault,
    FolderExistsError,
    VaultDocument,
    VaultError,
)


class TestCreateFolder:
    def test_creates_nested_folder(self, vault: FileSystemVault, vault_root: Path) -> None:
        vault.create_folder("Games/Rewards")
        assert (vault_root / "Games" / "Rewards").is_dir()

    def test_existing_folder_raises(self, vault: FileSystemVault) -> None:
        vault.create_folder("Rewards")
        with pytest.raises(FolderExistsError, match="Rewards"):
            vault.create_folder("Rewards")

    def test_folder_blocked_by_file(self, vault: FileSystemVault, vault_root: Path) -> None:
        (vault_root / "Blocked").write_text("x")
        with pytest.raises(VaultError):
            vault.create_folder("Blocked/Rewards")


class TestGetByPath:
    def test_returns_document_for_existing_note(
        self, vault: FileSystemVault, vault_root: Path
    ) -> None:
        (vault_root / "note.md").write_text("x")
        assert vault.get_by_path("note.md") == VaultDocument(path="note.md")

    def test_returns_none_for_missing_note(self, vault: FileSystemVault) -> None:
        assert vault.get_by_path("missing.md") is None

    def test_returns_none_for_folder(self, vault: FileSystemVault) -> None:
        vault.create_folder("Rewards")
        assert vault.get_by_path("Rewards") is None

    def test_null_byte_in_name_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(VaultError):
            vault.get_by_path("a\x00b.md")


class TestCreate:
    def test_writes_text_unchanged(self, vault: FileSystemVault, vault_root: Path) -> None:
        vault.create_folder("Rewards")
        document = vault.create("Rewards/Gold Coin.md", "# Gold Coin\r\nValue: 5")
        assert document.path == "Rewards/Gold Coin.md"
        assert document.name == "Gold Coin.md"
        assert (vault_root / "Rewards" / "Gold Coin.md").read_bytes() == (
            "# Gold Coin\r\nValue: 5".encode()
        )

    def test_existing_note_raises(self, vault: FileSystemVault) -> None:
        vault.create("note.md", "first")
        with pytest.raises(DocumentWriteError, match="already exists"):
            vault.create("note.md", "second")

    def test_missing_parent_folder_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(DocumentWriteError):
            vault.create("Missing/note.md", "text")

    def test_path_outside_vault_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(VaultError, match="escapes"):
            vault.create("../outside.md", "text")

    def test_null_byte_in_name_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(VaultError, match="Invalid vault path"):
            vault.create("a\x00b.md", "text")

    def test_overlong_name_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(VaultError):
            vault.create("x" * 300 + ".md", "text")


class TestDelete:
    def test_removes_note(self, vault: FileSystemVault, vault_root: Path) -> None:
        document = vault.create("note.md", "text")
        vault.delete(document)
        assert not (vault_root / "note.md").exists()

    def test_missing_note_raises(self, vault: FileSystemVault) -> None:
        with pytest.raises(DocumentWriteError):
            vault.delete(VaultDocument(path="missing.md"))
