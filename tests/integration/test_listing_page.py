"""
Integration tests for the listing page flow.
Tests: index document -> listing page shell with cards, error view and preview banner.
"""

import json
import shutil
from pathlib import Path

import pytest
import requests

from folio.contexts.intake import DocumentSource
from folio.contexts.rendering import PageContext, render_listing_page

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
BASE_URL = "https://cdn.example.com/data"

ERROR_TEXT = "Sorry, there was an error loading the resume list. Please try again later."


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def listing_page(path: str = "/index.html") -> PageContext:
    return PageContext.from_page_template("listing", path=path)


def assert_error_view(context: PageContext):
    grid = context.select(".resume-grid")
    assert grid.select_one(".error-message").get_text().strip() == ERROR_TEXT
    assert grid.select(".resume-card") == []
    assert grid.select_one(".loading") is None


@pytest.mark.integration
def test_cards_in_index_order():
    context = listing_page()
    result = render_listing_page(context, DocumentSource(FIXTURES_PATH))

    assert result.success
    assert result.regions_applied == ["resume_grid"]

    cards = context.select(".resume-grid").select(".resume-card")
    assert [card.select_one(".resume-name").get_text() for card in cards] == ["Jane Doe", "John Smith"]
    assert context.select(".loading") is None


@pytest.mark.integration
def test_card_content():
    context = listing_page()
    render_listing_page(context, DocumentSource(FIXTURES_PATH))

    card = context.select(".resume-card")
    assert card.select_one(".resume-title").get_text() == "Senior Software Engineer | Cloud Architect"
    assert card.select_one(".resume-location").get_text() == "Seattle, WA"
    assert [tag.get_text() for tag in card.select(".skill-tag")] == ["Python", "Kubernetes", "PostgreSQL"]

    view, new_tab = card.select(".resume-actions a")
    assert view["href"] == new_tab["href"] == "resumes/jane-doe/"
    assert view.get("target") is None
    assert new_tab["target"] == "_blank"


@pytest.mark.integration
def test_empty_index(tmp_path):
    (tmp_path / "resumes.json").write_text(json.dumps({"resumes": []}), encoding="utf-8")

    context = listing_page()
    result = render_listing_page(context, DocumentSource(tmp_path))

    assert result.success
    assert context.select(".resume-grid").select(".resume-card") == []


@pytest.mark.integration
def test_missing_index(tmp_path):
    context = listing_page()
    result = render_listing_page(context, DocumentSource(tmp_path))

    assert not result.success
    assert result.document is None
    assert_error_view(context)


@pytest.mark.integration
def test_invalid_index_json(tmp_path):
    (tmp_path / "resumes.json").write_text('{"resumes": [', encoding="utf-8")

    context = listing_page()
    result = render_listing_page(context, DocumentSource(tmp_path))

    assert not result.success
    assert_error_view(context)


@pytest.mark.integration
def test_index_missing_entry_field(tmp_path):
    shutil.copy(FIXTURES_PATH / "resumes.json", tmp_path / "resumes.json")
    data = json.loads((tmp_path / "resumes.json").read_text(encoding="utf-8"))
    del data["resumes"][1]["featured_skills"]
    (tmp_path / "resumes.json").write_text(json.dumps(data), encoding="utf-8")

    context = listing_page()
    render_listing_page(context, DocumentSource(tmp_path))

    assert_error_view(context)


@pytest.mark.integration
def test_remote_index(monkeypatch):
    body = (FIXTURES_PATH / "resumes.json").read_text(encoding="utf-8")
    monkeypatch.setattr(requests, "get", lambda url, *a, **kw: FakeResponse(body))

    context = listing_page()
    result = render_listing_page(context, DocumentSource(BASE_URL))

    assert result.success
    assert len(context.select(".resume-grid").select(".resume-card")) == 2


@pytest.mark.integration
def test_remote_not_found(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, *a, **kw: FakeResponse("Not Found", 404))

    context = listing_page()
    result = render_listing_page(context, DocumentSource(BASE_URL))

    assert not result.success
    assert_error_view(context)


@pytest.mark.integration
def test_remote_network_error(monkeypatch):
    def fake_get(url, *args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fake_get)

    context = listing_page()
    render_listing_page(context, DocumentSource(BASE_URL))

    assert_error_view(context)


@pytest.mark.integration
def test_preview_banner():
    context = listing_page("/preview/feature-x/index.html")
    result = render_listing_page(context, DocumentSource(FIXTURES_PATH))

    indicator = context.select("#preview-indicator")
    assert "display: block" in indicator["style"]
    assert "display: none" not in indicator["style"]
    assert context.select("#preview-branch").get_text() == "feature-x"
    assert result.regions_applied[:2] == ["preview_branch", "preview_indicator"]


@pytest.mark.integration
def test_no_banner_outside_preview():
    context = listing_page("/index.html")
    render_listing_page(context, DocumentSource(FIXTURES_PATH))

    assert "display: none" in context.select("#preview-indicator")["style"]
    assert context.select("#preview-branch").get_text() == ""


@pytest.mark.integration
def test_banner_shown_when_index_fails(tmp_path):
    """The banner does not depend on data loading."""
    context = listing_page("/preview/feature-x/")
    render_listing_page(context, DocumentSource(tmp_path))

    assert context.select("#preview-branch").get_text() == "feature-x"
    assert_error_view(context)


@pytest.mark.integration
def test_banner_needs_both_elements():
    context = PageContext(
        '<div id="preview-indicator" style="display: none;"></div><section class="resume-grid"></section>',
        path="/preview/feature-x/",
    )
    result = render_listing_page(context, DocumentSource(FIXTURES_PATH))

    assert context.select("#preview-indicator")["style"] == "display: none;"
    assert "preview_indicator" not in result.regions_applied


@pytest.mark.integration
def test_rendering_twice():
    """Re-rendering replaces the grid rather than appending to it."""
    context = listing_page()
    render_listing_page(context, DocumentSource(FIXTURES_PATH))
    render_listing_page(context, DocumentSource(FIXTURES_PATH))

    assert len(context.select(".resume-grid").select(".resume-card")) == 2
