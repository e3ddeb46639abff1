"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Raised when a region's fragment template is missing, not configured, or fails to render.

    Unlike document load failures, this is a defect in the packaged templates or
    region table, so it propagates instead of turning into an error view.

    Attributes:
        message: Error description
        region: Region id whose fragment was being rendered
        template_path: Path to the fragment template
        original_error: The underlying Jinja2 error
    """

    def __init__(
        self,
        message: str,
        region: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.region = region
        self.template_path = template_path
        self.original_error = original_error

        details = [
            f"{label}: {value}"
            for label, value in (("Region", region), ("Template", template_path))
            if value
        ]
        if original_error:
            details.append(f"Caused by {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join([message, *details]))


class UnknownRegionError(KeyError):
    """Raised when a region id has no entry in the region configuration."""

    pass
