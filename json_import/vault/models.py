from dataclasses import dataclass


@dataclass(frozen=True)
class VaultDocument:
    """A note stored in the vault, addressed by its vault-relative path."""

    path: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]
