"""
Page Flows

The two page flows, each run once per page render:
- Listing flow: preview banner + one card per index entry
- Detail flow: identifier from the page path, then every résumé region

Both fall back to a static error view when the document is unavailable. A
failure is terminal for that render: logged, shown, never retried or raised.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from folio.contexts.intake import (
    DocumentSource,
    DocumentUnavailableError,
    load_resume,
    load_resume_index,
    resolve_resume_identifier,
)
from folio.contexts.rendering.logger import _log_debug, _log_error, _log_info
from folio.contexts.rendering.page_context import PageContext
from folio.contexts.templating.region_renderer import RegionRenderer


@dataclass
class PageRenderResult:
    """
    Result of rendering one page.

    Attributes:
        success: Whether the page's document loaded and rendered
        page_path: Path the page is served at
        regions_applied: Ids of regions written into the page, in order
        resume_id: Résumé identifier (detail pages, once resolved)
        document: The loaded ResumeIndex or Resume (None on failure)
        error: Failure description (None on success)
    """

    success: bool
    page_path: str
    regions_applied: List[str] = field(default_factory=list)
    resume_id: Optional[str] = None
    document: Any = None
    error: Optional[str] = None


def render_listing_page(
    context: PageContext,
    source: DocumentSource = None,
    renderer: RegionRenderer = None,
) -> PageRenderResult:
    """
    Render the listing page into a page context.

    Shows the preview banner when the page path is a preview deployment, then
    loads the index and writes one card per entry. On load failure the grid
    shows a retry-later notice instead.

    Args:
        context: Listing page document and its path
        source: Document source (default: FOLIO_DATA_PATH)
        renderer: Region renderer (default: packaged templates)

    Returns:
        PageRenderResult; `document` holds the ResumeIndex on success
    """
    source = source or DocumentSource()
    renderer = renderer or RegionRenderer()
    applied: List[str] = []

    # Banner is independent of data loading and needs both of its elements
    banner = renderer.render_preview_banner(context.path)
    if banner and context.has_region("preview_indicator") and context.has_region("preview_branch"):
        applied += context.apply_all(banner)
        _log_debug(f"Preview banner shown for {context.path}")

    try:
        index = load_resume_index(source)
    except DocumentUnavailableError as e:
        _log_error(f"Error loading resume list: {e}")
        applied += context.apply_all(renderer.render_listing_error())
        return PageRenderResult(
            success=False, page_path=context.path, regions_applied=applied, error=str(e)
        )

    applied += context.apply_all(renderer.render_listing(index))
    _log_info(f"Rendered listing page {context.path} ({len(index)} resumes)")

    return PageRenderResult(
        success=True, page_path=context.path, regions_applied=applied, document=index
    )


def render_resume_page(
    context: PageContext,
    source: DocumentSource = None,
    renderer: RegionRenderer = None,
) -> PageRenderResult:
    """
    Render a résumé detail page into a page context.

    Resolves the identifier from the page path (no load is attempted if that
    fails), loads the résumé and writes every region it has data for. On any
    failure the page container is replaced by the not-found view.

    Args:
        context: Résumé page document and its path
        source: Document source (default: FOLIO_DATA_PATH)
        renderer: Region renderer (default: packaged templates)

    Returns:
        PageRenderResult; `document` holds the Resume on success
    """
    source = source or DocumentSource()
    renderer = renderer or RegionRenderer()
    resume_id = None

    try:
        resume_id = resolve_resume_identifier(context.path)
        resume = load_resume(source, resume_id)
    except DocumentUnavailableError as e:
        _log_error(f"Error loading resume: {e}")
        applied = context.apply_all(renderer.render_resume_error())
        return PageRenderResult(
            success=False,
            page_path=context.path,
            regions_applied=applied,
            resume_id=resume_id,
            error=str(e),
        )

    applied = context.apply_all(renderer.render_resume(resume))
    _log_info(f"Rendered resume page {context.path} ({len(applied)} regions)")

    return PageRenderResult(
        success=True,
        page_path=context.path,
        regions_applied=applied,
        resume_id=resume_id,
        document=resume,
    )
