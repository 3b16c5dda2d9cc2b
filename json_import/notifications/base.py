from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """One-way sink for user-visible status messages."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a message without blocking the caller."""
