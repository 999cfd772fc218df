"""Custom exceptions for the customization context."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when the page shell fails to render.

    Attributes:
        message: Error description
        shell_path: Path to the page shell template
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        shell_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.shell_path = shell_path
        self.original_error = original_error

        parts = [message]

        if shell_path:
            parts.append(f"\nShell: {shell_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a named template is not present in the template library."""

    def __init__(self, template_name: str, templates_path: Path):
        self.template_name = template_name
        self.templates_path = templates_path
        super().__init__(f"Template '{template_name}' not found in {templates_path}")


class InvalidPortfolioDataError(ValueError):
    """
    Exception raised when a stored portfolio data bundle is malformed.

    Raised by the YAML/dict loaders only (e.g., missing 'profile' mapping,
    'projects' that is not a list). The customization engine itself never
    raises for missing or empty data.
    """

    pass
