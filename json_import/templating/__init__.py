from json_import.templating.exceptions import (
    TemplateCompileError,
    TemplateError,
    TemplateRenderError,
)
from json_import.templating.renderer import TemplateRenderer

__all__ = [
    "TemplateCompileError",
    "TemplateError",
    "TemplateRenderError",
    "TemplateRenderer",
]
