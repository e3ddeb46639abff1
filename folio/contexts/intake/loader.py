"""
Document Loading

Resolves résumé identifiers from page paths and loads JSON documents from a
base location, which is either a local data directory or an http(s) base URL.

Every failure mode (missing file, network error, non-success status, invalid
JSON, invalid index structure, unresolvable identifier) surfaces as a subclass
of DocumentUnavailableError. One attempt per load: no retries.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

import requests
from dotenv import load_dotenv

from folio.contexts.intake.exceptions import (
    DocumentTransportError,
    MalformedDocumentError,
    MissingFieldError,
    UnresolvableIdentifierError,
)
from folio.contexts.intake.logger import _log_debug, log_document_loaded
from folio.contexts.intake.resume_data_structure import Resume, ResumeIndex

load_dotenv()
DATA_PATH = os.getenv("FOLIO_DATA_PATH", "data")

# Fixed location of the index document, relative to the base location
INDEX_LOCATION = "resumes.json"

# Identifier that would resolve to the index document itself
INDEX_IDENTIFIER = INDEX_LOCATION.rsplit(".", 1)[0]

REMOTE_SCHEMES = ("http://", "https://")

# Identifiers become file names, so only plain slugs are accepted
RESUME_ID_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


def resolve_resume_identifier(page_path: str) -> str:
    """
    Derive the résumé identifier from a detail page's path.

    The identifier is the last path segment, unless the path ends with a slash
    or a file name (e.g. index.html), in which case it is the segment before.

    Args:
        page_path: Path of the current page (e.g., "/resumes/jane-doe/")

    Returns:
        Résumé identifier

    Raises:
        UnresolvableIdentifierError: If no identifier can be derived

    Examples:
        >>> resolve_resume_identifier("/resumes/jane-doe/")
        'jane-doe'
        >>> resolve_resume_identifier("/resumes/jane-doe")
        'jane-doe'
        >>> resolve_resume_identifier("/resumes/jane-doe/index.html")
        'jane-doe'
    """
    segments = (page_path or "").split("/")
    last = segments[-1]

    if last == "" or "." in last:
        resume_id = segments[-2] if len(segments) >= 2 else ""
    else:
        resume_id = last

    if not resume_id or resume_id in (".", "..") or not RESUME_ID_PATTERN.match(resume_id):
        raise UnresolvableIdentifierError(f"No resume identifier in page path {page_path!r}")

    if resume_id == INDEX_IDENTIFIER:
        raise UnresolvableIdentifierError(f"Page path {page_path!r} names the index, not a resume")

    return resume_id


def resume_location(resume_id: str) -> str:
    """Location of a résumé document, relative to the base location."""
    return f"{resume_id}.json"


class DocumentSource:
    """
    Reads JSON documents relative to a base location.

    The base location is either a local directory (str or Path) or a base URL
    starting with http:// or https://.
    """

    def __init__(self, base_location: Optional[Union[str, Path]] = None):
        """
        Initialize the document source.

        Args:
            base_location: Directory or base URL. Defaults to FOLIO_DATA_PATH from environment
        """
        if base_location is None:
            base_location = DATA_PATH

        self.base_location = base_location
        self.is_remote = str(base_location).startswith(REMOTE_SCHEMES)

    def locate(self, relative_location: str) -> str:
        """
        Resolve a relative location against the base location.

        Args:
            relative_location: e.g. "resumes.json" or "jane-doe.json"

        Returns:
            Absolute URL (remote) or file path (local) as a string
        """
        if self.is_remote:
            return f"{str(self.base_location).rstrip('/')}/{relative_location}"
        return str(Path(self.base_location) / relative_location)

    def fetch_json(self, relative_location: str) -> Any:
        """
        Retrieve and parse a JSON document.

        Reading completes before parsing starts; a single attempt is made.

        Args:
            relative_location: Location relative to the base location

        Returns:
            Parsed JSON document

        Raises:
            DocumentTransportError: File or network failure, or non-success status
            MalformedDocumentError: Content is not valid JSON
        """
        location = self.locate(relative_location)
        _log_debug(f"Fetching {location}")

        text = self._read_remote(location) if self.is_remote else self._read_local(location)

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError("Document is not valid JSON", location, e) from e

    def _read_remote(self, location: str) -> str:
        try:
            response = requests.get(location)
        except requests.RequestException as e:
            raise DocumentTransportError("Request failed", location, e) from e

        if not response.ok:
            raise DocumentTransportError(
                f"Non-success response status {response.status_code}", location
            )

        return response.text

    def _read_local(self, location: str) -> str:
        try:
            return Path(location).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocumentError("Document is not valid UTF-8 text", location, e) from e
        except OSError as e:
            raise DocumentTransportError("Document could not be read", location, e) from e


def load_resume_index(source: DocumentSource) -> ResumeIndex:
    """
    Load and validate the index document for the listing page.

    Args:
        source: Where to read documents from

    Returns:
        ResumeIndex with entries in document order

    Raises:
        DocumentUnavailableError: Any transport, parse or structure failure
    """
    data = source.fetch_json(INDEX_LOCATION)

    try:
        index = ResumeIndex.from_dict(data)
    except MissingFieldError as e:
        raise MalformedDocumentError(
            "Index document has an invalid structure", source.locate(INDEX_LOCATION), e
        ) from e

    log_document_loaded(source.locate(INDEX_LOCATION), f"index ({len(index)} entries)")
    return index


def load_resume(source: DocumentSource, resume_id: str) -> Resume:
    """
    Load a single résumé document.

    Incomplete sections do not fail the load; they are parsed as None and
    their regions are skipped at render time. A document without a name or
    title is not a résumé at all and fails the load.

    Args:
        source: Where to read documents from
        resume_id: Identifier from resolve_resume_identifier()

    Returns:
        Resume instance

    Raises:
        DocumentUnavailableError: Transport or parse failure, or a document that is not a
            JSON object or lacks a name or title
    """
    location = resume_location(resume_id)
    data = source.fetch_json(location)

    if not isinstance(data, dict):
        raise MalformedDocumentError("Resume document is not a JSON object", source.locate(location))

    resume = Resume.from_dict(data)
    if resume.name is None or resume.title is None:
        raise MalformedDocumentError(
            "Resume document has no name or title", source.locate(location)
        )

    log_document_loaded(source.locate(location), "resume")
    return resume
