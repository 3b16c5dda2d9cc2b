from typing import Any

from json_import.config.exceptions import SettingsStoreError
from json_import.config.store import SettingsStore
from json_import.converter.models import RecordOutcome, RecordStatus
from json_import.converter.pipeline import ConversionContext, ConversionStep
from json_import.converter.writer import NoteWriter
from json_import.logging.logger import Log
from json_import.naming import derive_name, note_path, sanitize_name
from json_import.notifications.base import BaseNotifier
from json_import.records import normalize, parse_json
from json_import.stringify import UNRESOLVED_MARKER
from json_import.templating import TemplateRenderer, TemplateRenderError
from json_import.vault.base import BaseVault
from json_import.vault.exceptions import FolderExistsError, VaultError


class ParseJsonStep(ConversionStep):
    def run(self, context: ConversionContext) -> ConversionContext:
        context.json_value = parse_json(context.json_document.text)
        Log.debug(f"Parsed JSON from {context.json_document.describe()}")
        return context


class CompileTemplateStep(ConversionStep):
    def __init__(self, renderer: TemplateRenderer) -> None:
        self._renderer = renderer

    def run(self, context: ConversionContext) -> ConversionContext:
        context.template = self._renderer.compile(context.template_document.text)
        Log.debug(f"Compiled template {context.template_document.describe()}")
        return context


class NormalizeRecordsStep(ConversionStep):
    def run(self, context: ConversionContext) -> ConversionContext:
        context.records = normalize(context.json_value)
        Log.info(f"Found {len(context.records)} records")
        return context


class PersistSettingsStep(ConversionStep):
    """Remembers the name field and folder; a failed save never stops the run."""

    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    def run(self, context: ConversionContext) -> ConversionContext:
        settings = self._store.load().model_copy(
            update={"name_field": context.name_field, "folder_name": context.folder}
        )
        try:
            self._store.save(settings)
        except SettingsStoreError as exc:
            Log.warning(f"Settings not saved: {exc}")
        return context


class EnsureFolderStep(ConversionStep):
    def __init__(self, vault: BaseVault) -> None:
        self._vault = vault

    def run(self, context: ConversionContext) -> ConversionContext:
        folder = context.folder.strip("/")
        if not folder:
            return context
        try:
            self._vault.create_folder(folder)
            Log.info(f"Created destination folder '{folder}'")
        except FolderExistsError:
            Log.debug(f"Destination '{folder}' already exists")
        except VaultError as exc:
            Log.error(f"Destination '{folder}' could not be created: {exc}")
        return context


class WriteNotesStep(ConversionStep):
    """Renders and writes one note per record, in input order.

    Problems with a single record are recorded on its outcome and never
    stop the remaining records.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        vault: BaseVault,
        notifier: BaseNotifier,
        write_timeout_seconds: float,
    ) -> None:
        self._renderer = renderer
        self._vault = vault
        self._notifier = notifier
        self._write_timeout_seconds = write_timeout_seconds

    def run(self, context: ConversionContext) -> ConversionContext:
        if context.template is None:
            raise ValueError("ConversionContext.template must be set before writing notes")
        written_by: dict[str, int] = {}
        with NoteWriter(self._vault, self._write_timeout_seconds) as writer:
            for index, record in enumerate(context.records):
                if context.cancel_token.cancelled:
                    context.cancelled = True
                    context.outcomes.extend(self._skip_remaining(context, index))
                    Log.warning(f"Conversion cancelled before record {index}")
                    break
                outcome = self._convert_record(context, writer, index, record)
                context.outcomes.append(outcome)
                if outcome.status is RecordStatus.FAILED:
                    continue
                if outcome.path in written_by:
                    Log.warning(
                        f"Record {index} ('{outcome.name}') replaced note '{outcome.path}' "
                        f"written for record {written_by[outcome.path]}"
                    )
                written_by[outcome.path] = index
        return context

    def _convert_record(
        self,
        context: ConversionContext,
        writer: NoteWriter,
        index: int,
        record: Any,
    ) -> RecordOutcome:
        name = derive_name(record, context.name_field)
        try:
            body = self._renderer.render(context.template, record)
        except TemplateRenderError as exc:
            return self._fail(index, name, note_path(context.folder, sanitize_name(name)), exc)

        status = RecordStatus.WRITTEN
        if UNRESOLVED_MARKER in body:
            Log.warning(f"{UNRESOLVED_MARKER} appears in '{name}'")
            self._notifier.notify(
                f"Incomplete conversion for '{name}'. Look for '{UNRESOLVED_MARKER}'"
            )
            status = RecordStatus.INCOMPLETE

        path = note_path(context.folder, sanitize_name(name))
        try:
            writer.overwrite(path, body)
        except VaultError as exc:
            return self._fail(index, name, path, exc)
        Log.debug(f"Wrote '{path}'")
        return RecordOutcome(index=index, name=name, path=path, status=status)

    def _fail(self, index: int, name: str, path: str, exc: Exception) -> RecordOutcome:
        Log.error(f"Record {index} ('{name}') failed: {exc}")
        self._notifier.notify(f"Failed to convert '{name}': {exc}")
        return RecordOutcome(
            index=index, name=name, path=path, status=RecordStatus.FAILED, message=str(exc)
        )

    @staticmethod
    def _skip_remaining(context: ConversionContext, start: int) -> list[RecordOutcome]:
        outcomes = []
        for index in range(start, len(context.records)):
            name = derive_name(context.records[index], context.name_field)
            outcomes.append(
                RecordOutcome(
                    index=index,
                    name=name,
                    path=note_path(context.folder, sanitize_name(name)),
                    status=RecordStatus.SKIPPED,
                    message="cancelled",
                )
            )
        return outcomes
