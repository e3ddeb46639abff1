"""
Intake Context

Responsibilities:
- Resolves résumé identifiers from page paths
- Loads index and résumé JSON documents from a directory or base URL
- Parses documents into the immutable résumé data model

Owns: Document locations, loading failures, the résumé data model
Never: Decides how anything is displayed
"""

from folio.contexts.intake.exceptions import (
    DocumentTransportError,
    DocumentUnavailableError,
    MalformedDocumentError,
    MissingFieldError,
    UnresolvableIdentifierError,
)
from folio.contexts.intake.loader import (
    DocumentSource,
    load_resume,
    load_resume_index,
    resolve_resume_identifier,
)
from folio.contexts.intake.resume_data_structure import (
    Certification,
    ContactInfo,
    Education,
    Job,
    Project,
    Resume,
    ResumeIndex,
    ResumeIndexEntry,
    SkillSet,
)

__all__ = [
    # Loading
    "DocumentSource",
    "load_resume",
    "load_resume_index",
    "resolve_resume_identifier",
    # Failures
    "DocumentUnavailableError",
    "DocumentTransportError",
    "MalformedDocumentError",
    "UnresolvableIdentifierError",
    "MissingFieldError",
    # Data structure classes
    "Resume",
    "ResumeIndex",
    "ResumeIndexEntry",
    "ContactInfo",
    "Job",
    "SkillSet",
    "Education",
    "Certification",
    "Project",
]
