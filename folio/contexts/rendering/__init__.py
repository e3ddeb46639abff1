"""
Rendering Context

Responsibilities:
- Holds the page being rendered (document + served path) as a PageContext
- Writes region contents into the page per the region configuration table
- Runs the listing and detail page flows, including their error views
- Builds the static site (listing page + one page per listed résumé)

Owns: Page documents, page flows, site output layout
Never: Parses résumé JSON or decides region content
"""

from folio.contexts.rendering.page_context import PageContext
from folio.contexts.rendering.page_flows import (
    PageRenderResult,
    render_listing_page,
    render_resume_page,
)
from folio.contexts.rendering.site_builder import (
    ResumeCheck,
    SiteBuildResult,
    build_site,
    check_site,
    site_root_path,
)

__all__ = [
    # Page
    "PageContext",
    # Page flows
    "PageRenderResult",
    "render_listing_page",
    "render_resume_page",
    # Site
    "SiteBuildResult",
    "ResumeCheck",
    "build_site",
    "check_site",
    "site_root_path",
]
