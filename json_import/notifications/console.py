import click

from json_import.logging.logger import Log
from json_import.notifications.base import BaseNotifier


class ConsoleNotifier(BaseNotifier):
    """Prints notifications on the terminal and mirrors them to the log."""

    def __init__(self, err: bool = False) -> None:
        self._err = err

    def notify(self, message: str) -> None:
        Log.debug(f"Notification: {message}")
        click.echo(message, err=self._err)
