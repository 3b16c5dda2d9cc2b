class TemplateError(Exception):
    """Base exception for template compilation and rendering."""


class TemplateCompileError(TemplateError):
    """Raised when the template text has a syntax error."""


class TemplateRenderError(TemplateError):
    """Raised when rendering fails for a single record."""
