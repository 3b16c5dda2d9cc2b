from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from jinja2 import Template

from json_import.converter.cancellation import CancellationToken
from json_import.converter.models import RecordOutcome, SourceDocument


@dataclass(slots=True)
class ConversionContext:
    json_document: SourceDocument
    template_document: SourceDocument
    name_field: str
    folder: str
    cancel_token: CancellationToken = field(default_factory=CancellationToken)
    json_value: Any = None
    template: Template | None = None
    records: list[Any] = field(default_factory=list)
    outcomes: list[RecordOutcome] = field(default_factory=list)
    cancelled: bool = False


class ConversionStep(ABC):
    @abstractmethod
    def run(self, context: ConversionContext) -> ConversionContext:
        raise NotImplementedError
