import signal
import sys
from pathlib import Path

import click

from json_import.config.settings import Settings
from json_import.config.store import SettingsStore
from json_import.converter.cancellation import CancellationToken
from json_import.converter.converter import build_converter
from json_import.converter.exceptions import SourceReadError
from json_import.converter.models import DocumentKind
from json_import.converter.sources import read_source
from json_import.logging.logger import Log
from json_import.notifications.console import ConsoleNotifier


@click.command()
@click.argument("json_file", required=False, type=click.Path(path_type=Path, dir_okay=False))
@click.argument(
    "template_file", required=False, type=click.Path(path_type=Path, dir_okay=False)
)
@click.option("--name-field", default=None, help="Field of each record used as the note name.")
@click.option("--folder", default=None, help="Vault folder that receives the notes.")
@click.option(
    "--vault",
    "vault_root",
    default=None,
    type=click.Path(path_type=Path, file_okay=False),
    help="Root directory of the vault (defaults to VAULT_ROOT).",
)
def main(
    json_file: Path | None,
    template_file: Path | None,
    name_field: str | None,
    folder: str | None,
    vault_root: Path | None,
) -> None:
    """Create one note per record of JSON_FILE, rendered with TEMPLATE_FILE.

    Arguments and options left out fall back to the values used last time.
    """
    settings = Settings()
    if vault_root is not None:
        settings = settings.model_copy(update={"vault_root": vault_root})
    Log.configure(settings.log_level)

    store = SettingsStore(settings.resolved_settings_file())
    stored = store.load()
    notifier = ConsoleNotifier()

    json_path = json_file if json_file is not None else Path(stored.json_file)
    template_path = template_file if template_file is not None else Path(stored.template_file)
    if not json_path.is_file():
        notifier.notify("No JSON file selected")
        sys.exit(2)
    if not template_path.is_file():
        notifier.notify("No Template file selected")
        sys.exit(2)

    try:
        json_document = read_source(json_path, DocumentKind.JSON_DATA)
        template_document = read_source(template_path, DocumentKind.TEMPLATE)
    except SourceReadError as exc:
        notifier.notify(str(exc))
        sys.exit(2)

    converter = build_converter(settings, notifier, store=store)
    token = CancellationToken()
    previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: token.cancel())
    try:
        report = converter.convert(
            json_document,
            template_document,
            name_field=name_field if name_field is not None else stored.name_field,
            folder=folder if folder is not None else stored.folder_name,
            cancel_token=token,
        )
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if not report.succeeded:
        sys.exit(1)


if __name__ == "__main__":
    main()
