"""Custom exceptions for the intake context."""

from typing import Optional


class DocumentUnavailableError(Exception):
    """
    Base exception for any résumé or index document that could not be obtained.

    Page flows handle every subclass identically (log, show the error view, stop),
    so callers that only care about "available or not" catch this class.

    Attributes:
        message: Error description
        location: Resolved location of the document (file path or URL), if known
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.location = location
        self.original_error = original_error

        parts = [message]

        if location:
            parts.append(f"Location: {location}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class DocumentTransportError(DocumentUnavailableError):
    """Raised when a document cannot be read (missing file, network failure, non-success status)."""

    pass


class MalformedDocumentError(DocumentUnavailableError):
    """Raised when a document was read but is not valid JSON or lacks its required structure."""

    pass


class UnresolvableIdentifierError(DocumentUnavailableError):
    """Raised when no résumé identifier can be derived from a page path."""

    pass


class MissingFieldError(ValueError):
    """
    Raised while parsing when a field required by a section is absent or has the wrong shape.

    Attributes:
        field_path: Dotted path of the offending field (e.g., "experience[2].achievements")
    """

    def __init__(self, field_path: str, reason: str = "missing"):
        self.field_path = field_path
        self.reason = reason
        super().__init__(f"Field '{field_path}' is {reason}")
