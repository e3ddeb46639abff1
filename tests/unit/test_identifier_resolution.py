"""Unit tests for résumé identifier resolution from page paths."""

import pytest

from folio.contexts.intake import UnresolvableIdentifierError, resolve_resume_identifier
from folio.contexts.intake.loader import resume_location


@pytest.mark.unit
@pytest.mark.parametrize(
    "page_path",
    [
        "/resumes/jane-doe/",
        "/resumes/jane-doe",
        "/resumes/jane-doe/index.html",
        "/preview/feature-x/resumes/jane-doe/",
    ],
)
def test_resolves_identifier(page_path):
    """Trailing slash, bare segment and file name forms all give the same identifier."""
    assert resolve_resume_identifier(page_path) == "jane-doe"


@pytest.mark.unit
def test_identifier_may_contain_dots_before_file_name():
    """A dotted segment is only skipped when it is the last one."""
    assert resolve_resume_identifier("/resumes/j.doe/index.html") == "j.doe"


@pytest.mark.unit
@pytest.mark.parametrize(
    "page_path",
    ["/", "", "/index.html", "/resumes/../", "/resumes/jane doe/", "/resumes/%2e%2e/"],
)
def test_unresolvable_paths_raise(page_path):
    """Paths without a usable slug fail before any document is requested."""
    with pytest.raises(UnresolvableIdentifierError):
        resolve_resume_identifier(page_path)


@pytest.mark.unit
def test_unresolvable_is_document_unavailable():
    """Page flows treat an unresolvable identifier like any other load failure."""
    from folio.contexts.intake import DocumentUnavailableError

    with pytest.raises(DocumentUnavailableError):
        resolve_resume_identifier("/")


@pytest.mark.unit
def test_resume_location():
    assert resume_location("jane-doe") == "jane-doe.json"


@pytest.mark.unit
@pytest.mark.parametrize("page_path", ["/resumes/", "/resumes/resumes/", "/preview/x/resumes/index.html"])
def test_index_segment_is_not_an_identifier(page_path):
    """The segment naming the index document never resolves to a résumé."""
    with pytest.raises(UnresolvableIdentifierError):
        resolve_resume_identifier(page_path)
