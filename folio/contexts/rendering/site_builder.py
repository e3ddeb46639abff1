"""
Static Site Builder

Renders the listing page and every listed résumé page into an output directory,
laid out the way the site is served:

    {output}/index.html
    {output}/resumes/{resume_id}/index.html

Preview builds are served under /preview/{branch}/, which the listing page
detects to show its preview banner.
"""

import os
import posixpath
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlsplit

from dotenv import load_dotenv

from folio.contexts.intake import (
    DocumentSource,
    DocumentUnavailableError,
    load_resume,
    load_resume_index,
    resolve_resume_identifier,
)
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    _log_warning,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from folio.contexts.rendering.page_context import PageContext
from folio.contexts.rendering.page_flows import render_listing_page, render_resume_page
from folio.contexts.templating.region_renderer import (
    RESUME_REGION_IDS,
    RegionRenderer,
    region_ids,
)

load_dotenv()
SITE_PATH = Path(os.getenv("FOLIO_SITE_PATH", "outs/site"))

PAGE_FILE_NAME = "index.html"


@dataclass
class SiteBuildResult:
    """
    Result of build_site().

    Attributes:
        success: True when the listing and every résumé page rendered
        output_dir: Directory the site was written to
        pages_written: Files written, listing page first
        failed_resumes: Identifiers (or entry urls) whose page shows the error view or was not written
        error: Listing-level failure description, if any
        time_s: Build duration in seconds
    """

    success: bool
    output_dir: Path
    pages_written: List[Path] = field(default_factory=list)
    failed_resumes: List[str] = field(default_factory=list)
    error: Optional[str] = None
    time_s: float = 0.0


@dataclass
class ResumeCheck:
    """Outcome of checking one listed résumé without writing anything."""

    url: str
    resume_id: Optional[str] = None
    loaded: bool = False
    error: Optional[str] = None
    skipped_sections: List[str] = field(default_factory=list)
    skipped_regions: List[str] = field(default_factory=list)


def site_root_path(preview_branch: Optional[str] = None) -> str:
    """
    Path the site root is served at.

    Examples:
        >>> site_root_path()
        '/'
        >>> site_root_path("feature-x")
        '/preview/feature-x/'
    """
    if preview_branch:
        return f"/preview/{preview_branch.strip('/')}/"
    return "/"


def resume_page_path(root_path: str, entry_url: str) -> str:
    """
    Page path of a listed résumé, from its index entry url.

    Relative urls (e.g. "resumes/jane-doe/") are resolved against the site root.
    Absolute urls keep their own path, re-rooted under the site root when it is
    a preview root they are not already under. Dot segments are collapsed, so
    the result never climbs above "/"; a trailing slash is kept.

    Examples:
        >>> resume_page_path("/preview/x/", "/resumes/jane-doe/")
        '/preview/x/resumes/jane-doe/'
        >>> resume_page_path("/", "../../escaped/")
        '/escaped/'
    """
    path = urlsplit(entry_url).path
    if not path.startswith("/"):
        path = root_path + path
    elif not path.startswith(root_path):
        path = root_path + path.lstrip("/")

    normalized = posixpath.normpath(path)
    if path.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def output_file_for(page_path: str, root_path: str, output_dir: Path) -> Path:
    """
    File a page path is written to inside the output directory.

    Directory-style paths get an index.html.
    """
    relative = page_path[len(root_path):] if page_path.startswith(root_path) else page_path.lstrip("/")
    last_segment = relative.rsplit("/", 1)[-1]

    if relative == "" or relative.endswith("/"):
        relative += PAGE_FILE_NAME
    elif "." not in last_segment:
        relative += f"/{PAGE_FILE_NAME}"

    return output_dir / relative


def _is_within(output_file: Path, output_dir: Path) -> bool:
    """True if output_file resolves to a location inside output_dir."""
    try:
        output_file.resolve().relative_to(output_dir.resolve())
    except ValueError:
        return False
    return True


def _write_page(context: PageContext, output_file: Path) -> Path:
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(context.to_html(), encoding="utf-8")
    _log_debug(f"Wrote {output_file}")
    return output_file


def build_site(
    data_location: Optional[Union[str, Path]] = None,
    output_dir: Optional[Path] = None,
    preview_branch: Optional[str] = None,
    renderer: RegionRenderer = None,
    log_dir: Optional[Path] = None,
) -> SiteBuildResult:
    """
    Build the static site: listing page plus one page per listed résumé.

    Pages are written even when their document fails to load (they carry the
    error view), matching what a visitor of the live site would see.

    Args:
        data_location: Data directory or base URL (default: FOLIO_DATA_PATH)
        output_dir: Output directory (default: FOLIO_SITE_PATH)
        preview_branch: Build for a preview deployment under /preview/{branch}/
        renderer: Region renderer (default: packaged templates)
        log_dir: If given, configure file + console logging for this build there

    Returns:
        SiteBuildResult with written pages and failures
    """
    source = DocumentSource(data_location)
    output_dir = Path(output_dir) if output_dir is not None else SITE_PATH
    renderer = renderer or RegionRenderer()
    root_path = site_root_path(preview_branch)

    if log_dir is not None:
        setup_rendering_logger(log_dir, str(source.base_location))

    log_build_start(str(source.base_location), output_dir, root_path)
    start_time = time.time()

    result = SiteBuildResult(success=True, output_dir=output_dir)

    # Listing page
    listing_path = root_path + PAGE_FILE_NAME
    listing = PageContext.from_page_template("listing", path=listing_path)
    listing_result = render_listing_page(listing, source, renderer)
    result.pages_written.append(_write_page(listing, output_dir / PAGE_FILE_NAME))

    if not listing_result.success:
        result.success = False
        result.error = listing_result.error
        result.time_s = time.time() - start_time
        log_build_result(result, result.time_s)
        return result

    # One page per index entry, in index order
    for entry in listing_result.document.resumes:
        page_path = resume_page_path(root_path, entry.url)

        if not page_path.startswith(root_path):
            _log_warning(f"Skipping {entry.name}: url {entry.url!r} is outside the site root")
            result.failed_resumes.append(entry.url)
            continue

        output_file = output_file_for(page_path, root_path, output_dir)
        if not _is_within(output_file, output_dir):
            _log_warning(f"Skipping {entry.name}: url {entry.url!r} would write outside {output_dir}")
            result.failed_resumes.append(entry.url)
            continue

        context = PageContext.from_page_template("resume", path=page_path)
        page_result = render_resume_page(context, source, renderer)

        if page_result.resume_id is None:
            _log_warning(f"Skipping {entry.name}: no resume identifier in url {entry.url!r}")
            result.failed_resumes.append(entry.url)
            continue

        result.pages_written.append(_write_page(context, output_file))
        if not page_result.success:
            result.failed_resumes.append(page_result.resume_id)

    result.success = not result.failed_resumes
    result.time_s = time.time() - start_time
    log_build_result(result, result.time_s)
    return result


def check_site(
    data_location: Optional[Union[str, Path]] = None,
    renderer: RegionRenderer = None,
) -> List[ResumeCheck]:
    """
    Load every listed résumé and report what its page would leave out.

    Nothing is written. Useful before a build to spot incomplete documents.

    Args:
        data_location: Data directory or base URL (default: FOLIO_DATA_PATH)
        renderer: Region renderer (default: packaged templates)

    Returns:
        One ResumeCheck per index entry, in index order

    Raises:
        DocumentUnavailableError: If the index itself cannot be loaded
    """
    source = DocumentSource(data_location)
    renderer = renderer or RegionRenderer()
    checks = []

    for entry in load_resume_index(source).resumes:
        check = ResumeCheck(url=entry.url)
        checks.append(check)

        try:
            check.resume_id = resolve_resume_identifier(urlsplit(entry.url).path)
            resume = load_resume(source, check.resume_id)
        except DocumentUnavailableError as e:
            check.error = e.message
            continue

        rendered = region_ids(renderer.render_resume(resume))
        check.loaded = True
        check.skipped_sections = list(resume.skipped_sections)
        check.skipped_regions = [rid for rid in RESUME_REGION_IDS if rid not in rendered]

    _log_info(f"Checked {len(checks)} resumes")
    return checks
