"""Unit tests for writing region contents into a page document."""

import pytest

from folio.contexts.rendering import PageContext
from folio.contexts.templating import RegionContent
from folio.contexts.templating.exceptions import UnknownRegionError

RESUME_SHELL = """<html><head><title>Resume</title></head><body>
<main class="resume-main"><div class="container">
<h1 class="name"></h1>
<section class="experience"><h3>Professional Experience</h3><p>placeholder</p></section>
<div id="preview-indicator" style="color: red; display: none;"></div>
</div></main>
</body></html>"""


@pytest.fixture
def page():
    return PageContext(RESUME_SHELL, path="/resumes/jane-doe/")


@pytest.mark.unit
def test_text_region(page):
    assert page.apply(RegionContent("header_name", "Jane Doe"))
    assert page.select(".name").get_text() == "Jane Doe"


@pytest.mark.unit
def test_text_is_not_markup(page):
    page.apply(RegionContent("header_name", "<em>Jane</em>"))

    assert page.select(".name").find("em") is None
    assert page.select(".name").get_text() == "<em>Jane</em>"


@pytest.mark.unit
def test_apply_overwrites(page):
    """Applying a region twice leaves only the second content."""
    page.apply(RegionContent("header_name", "First"))
    page.apply(RegionContent("header_name", "Second"))

    assert page.select(".name").get_text() == "Second"


@pytest.mark.unit
def test_keep_heading(page):
    fragment = '<article class="job"><h4>Engineer</h4></article>'
    page.apply(RegionContent("experience", fragment))
    page.apply(RegionContent("experience", fragment))

    section = page.select(".experience")
    assert [h.get_text() for h in section.find_all("h3")] == ["Professional Experience"]
    assert len(section.select(".job")) == 1
    assert "placeholder" not in section.get_text()


@pytest.mark.unit
def test_missing_container_is_skipped(page):
    before = page.to_html()

    assert page.apply(RegionContent("skills", "<div>x</div>")) is False
    assert page.to_html() == before


@pytest.mark.unit
def test_reveal_keeps_other_styles(page):
    page.apply(RegionContent("preview_indicator"))
    assert page.select("#preview-indicator")["style"] == "color: red; display: block;"


@pytest.mark.unit
def test_reveal_without_style():
    page = PageContext('<div id="preview-indicator"></div>')
    page.apply(RegionContent("preview_indicator"))

    assert page.select("#preview-indicator")["style"] == "display: block;"


@pytest.mark.unit
def test_title(page):
    page.apply(RegionContent("document_title", "Jane Doe - Engineer Resume"))
    assert page.title == "Jane Doe - Engineer Resume"


@pytest.mark.unit
def test_title_created_in_head():
    page = PageContext("<html><head></head><body></body></html>")

    assert page.apply(RegionContent("document_title", "Jane"))
    assert page.title == "Jane"


@pytest.mark.unit
def test_title_without_head():
    page = PageContext("<div></div>")

    assert page.apply(RegionContent("document_title", "Jane")) is False
    assert page.title is None


@pytest.mark.unit
def test_apply_all_returns_written_ids(page):
    applied = page.apply_all(
        [
            RegionContent("header_name", "Jane"),
            RegionContent("skills", "<div></div>"),
            RegionContent("document_title", "Jane Resume"),
        ]
    )

    assert applied == ["header_name", "document_title"]


@pytest.mark.unit
def test_has_region(page):
    assert page.has_region("experience")
    assert not page.has_region("skills")


@pytest.mark.unit
def test_unknown_region(page):
    with pytest.raises(UnknownRegionError):
        page.apply(RegionContent("nonexistent_region", "x"))


@pytest.mark.unit
def test_page_templates():
    listing = PageContext.from_page_template("listing", path="/index.html")
    resume = PageContext.from_page_template("resume", path="/resumes/jane-doe/")

    assert listing.has_region("resume_grid")
    assert listing.has_region("preview_indicator")
    assert resume.has_region("personal_skills")
    assert resume.has_region("resume_error")


@pytest.mark.unit
def test_missing_page_template():
    with pytest.raises(FileNotFoundError):
        PageContext.from_page_template("nonexistent")
