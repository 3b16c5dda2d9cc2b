from json_import.config.settings import Settings
from json_import.config.store import SettingsStore
from json_import.converter.cancellation import CancellationToken
from json_import.converter.models import ConversionReport, ConversionState, SourceDocument
from json_import.converter.pipeline import ConversionContext, ConversionStep
from json_import.converter.steps import (
    CompileTemplateStep,
    EnsureFolderStep,
    NormalizeRecordsStep,
    ParseJsonStep,
    PersistSettingsStep,
    WriteNotesStep,
)
from json_import.logging.logger import Log
from json_import.notifications.base import BaseNotifier
from json_import.records import RecordsError
from json_import.templating import TemplateError, TemplateRenderer
from json_import.vault.base import BaseVault
from json_import.vault.filesystem import FileSystemVault


class Converter:
    """Orchestrates a conversion run.

    Pipeline: parse -> compile -> normalize, then persist settings ->
    ensure folder -> write notes. Errors in the first part abort the run
    before anything is written; the second part never fails as a whole.
    """

    def __init__(
        self,
        prepare_steps: list[ConversionStep],
        write_steps: list[ConversionStep],
        notifier: BaseNotifier,
    ) -> None:
        self._prepare_steps = prepare_steps
        self._write_steps = write_steps
        self._notifier = notifier

    def convert(
        self,
        json_document: SourceDocument,
        template_document: SourceDocument,
        name_field: str,
        folder: str,
        cancel_token: CancellationToken | None = None,
    ) -> ConversionReport:
        """Convert every record of json_document into a note under folder."""
        Log.info(
            f"Converting {json_document.describe()} with template "
            f"{template_document.describe()} into '{folder}' (name field '{name_field}')"
        )
        report = ConversionReport()
        context = ConversionContext(
            json_document=json_document,
            template_document=template_document,
            name_field=name_field,
            folder=folder,
            cancel_token=cancel_token if cancel_token is not None else CancellationToken(),
        )

        report.state = ConversionState.PARSING
        try:
            for step in self._prepare_steps:
                context = step.run(context)
        except (RecordsError, TemplateError) as exc:
            report.state = ConversionState.FAILED
            report.error_message = str(exc)
            Log.error(f"Conversion failed: {exc}")
            self._notifier.notify(str(exc))
            return report

        report.state = ConversionState.WRITING
        for step in self._write_steps:
            context = step.run(context)

        report.outcomes = list(context.outcomes)
        report.cancelled = context.cancelled
        report.state = ConversionState.REPORTED
        summary = report.summary()
        Log.info(summary)
        self._notifier.notify(summary)
        return report


def build_converter(
    settings: Settings,
    notifier: BaseNotifier,
    vault: BaseVault | None = None,
    store: SettingsStore | None = None,
) -> Converter:
    """Build a Converter with all required collaborators."""
    vault = vault if vault is not None else FileSystemVault(settings.vault_root)
    store = store if store is not None else SettingsStore(settings.resolved_settings_file())
    renderer = TemplateRenderer()
    return Converter(
        prepare_steps=[
            ParseJsonStep(),
            CompileTemplateStep(renderer),
            NormalizeRecordsStep(),
        ],
        write_steps=[
            PersistSettingsStep(store),
            EnsureFolderStep(vault),
            WriteNotesStep(
                renderer=renderer,
                vault=vault,
                notifier=notifier,
                write_timeout_seconds=settings.write_timeout_seconds,
            ),
        ],
        notifier=notifier,
    )
