"""Jinja2 rendering of note templates.

Design:
- No autoescape (notes are Markdown, not HTML).
- Missing fields render empty, also through chained access.
- Nested objects render as the unresolved marker so incomplete
  conversions can be detected in the output.
"""

from collections.abc import Mapping
from typing import Any

from jinja2 import ChainableUndefined, Environment, Template, TemplateSyntaxError, Undefined

from json_import.stringify import to_text
from json_import.templating.exceptions import TemplateCompileError, TemplateRenderError


def _finalize(value: Any) -> str:
    if value is None or isinstance(value, Undefined):
        return ""
    return to_text(value)


class TemplateRenderer:
    """Compiles a template once and renders it for each record."""

    def __init__(self) -> None:
        self._env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=ChainableUndefined,
            finalize=_finalize,
        )

    def compile(self, text: str) -> Template:
        """Compile template text.

        Raises:
            TemplateCompileError: on a syntax error, with its line number.
        """
        try:
            return self._env.from_string(text)
        except TemplateSyntaxError as exc:
            raise TemplateCompileError(
                f"Template error on line {exc.lineno}: {exc.message}"
            ) from exc

    def render(self, template: Template, record: Any) -> str:
        """Render one record; the record itself is also available as ``this``.

        Raises:
            TemplateRenderError: if evaluating the template fails.
        """
        context: dict[str, Any] = {"this": record}
        if isinstance(record, Mapping):
            context.update(record)
        try:
            return template.render(context)
        except Exception as exc:
            raise TemplateRenderError(f"Rendering failed: {exc}") from exc
