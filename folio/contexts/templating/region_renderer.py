"""
Region Renderer

Pure projection of résumé data into page regions.

Every render_* method maps data to a list of RegionContent (region id + content)
and never touches a page: where and how each region is written is decided by the
region configuration table and the rendering context's PageContext. A region
whose source data is absent produces no content at all.
"""

import os
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from dotenv import load_dotenv
from jinja2 import TemplateError

from folio.contexts.intake.resume_data_structure import Resume, ResumeIndex, SkillSet
from folio.contexts.templating.defaults import (
    CONTACT_ICONS,
    NOT_FOUND_TITLE,
    PERSONAL_SKILLS,
    SIDEBAR_LINK_TEXT,
    SKILL_CATEGORIES,
    SKILL_LEVEL_CATEGORY_STRIDE,
    SKILL_LEVELS,
)
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.logger import log_region_skipped
from folio.contexts.templating.registries import RegionConfigRegistry, TemplateRegistry
from folio.utils.text_processing import (
    first_title_segment,
    strip_url_scheme,
    strip_url_scheme_and_www,
)

load_dotenv()
SHOW_SKILL_LEVELS = os.getenv("FOLIO_SHOW_SKILL_LEVELS", "true").lower() == "true"

# Captures the branch name of a preview deployment path (/preview/<branch>/...)
PREVIEW_PATH_PATTERN = re.compile(r"/preview/([^/]+)")

# Link target of the "back to list" button, relative to a résumé page
LISTING_URL = "../../"

# Every region a fully populated résumé fills, in update order
RESUME_REGION_IDS = (
    "document_title",
    "header_name",
    "header_title",
    "header_location",
    "content_name",
    "content_title",
    "profile_name",
    "profile_title",
    "contact",
    "sidebar_contact",
    "profile_summary",
    "experience",
    "skills",
    "education",
    "certifications",
    "projects",
    "languages",
    "sidebar_education",
    "sidebar_languages",
    "personal_skills",
)


@dataclass(frozen=True)
class RegionContent:
    """
    Content for one page region.

    Attributes:
        region_id: Key into the region configuration table (e.g., "experience")
        content: Text or HTML fragment, depending on the region's configured mode
    """

    region_id: str
    content: str = ""


# Pure helpers


def document_title(resume: Resume) -> Optional[str]:
    """
    Browser title for a résumé page: "{name} - {first title segment} Resume".

    Returns:
        Title string, or None if name or title is missing
    """
    if resume.name is None or resume.title is None:
        return None
    return f"{resume.name} - {first_title_segment(resume.title)} Resume"


def skill_level(category_index: int, item_index: int) -> str:
    """
    Decorative level label for a skill tag.

    Cycles through SKILL_LEVELS by a position mixing category and item index.
    Purely visual: it says nothing about the person's actual proficiency.
    """
    position = (category_index * SKILL_LEVEL_CATEGORY_STRIDE + item_index) % len(SKILL_LEVELS)
    return SKILL_LEVELS[position]


def personal_skills(skills: SkillSet) -> List[str]:
    """Fixed personal skills followed by every approach skill, all upper-cased."""
    return [skill.upper() for skill in [*PERSONAL_SKILLS, *(skills.approach or ())]]


def preview_branch(page_path: str) -> Optional[str]:
    """
    Branch name of a preview deployment, taken from the page path.

    Example:
        >>> preview_branch("/preview/feature-x/index.html")
        'feature-x'
        >>> preview_branch("/index.html") is None
        True
    """
    match = PREVIEW_PATH_PATTERN.search(page_path or "")
    return match.group(1) if match else None


class RegionRenderer:
    """Renders résumé and index data into RegionContent lists."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        region_config_registry: RegionConfigRegistry = None,
        show_skill_levels: bool = SHOW_SKILL_LEVELS,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.region_config_registry = region_config_registry or RegionConfigRegistry()
        self.show_skill_levels = show_skill_levels

    def _render_fragment(self, region_id: str, **context: Any) -> RegionContent:
        """
        Render the fragment template configured for a region.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        template_name = self.region_config_registry.get_config(region_id).get("template")
        if template_name is None:
            raise TemplateRenderError(f"Region '{region_id}' has no template configured")

        try:
            template = self.template_registry.get_template(template_name)
            html = template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render region fragment",
                region=region_id,
                template_path=self.template_registry.get_template_path(template_name),
                original_error=e,
            ) from e

        return RegionContent(region_id, html.strip())

    # Listing page

    def render_listing(self, index: ResumeIndex) -> List[RegionContent]:
        """One card per index entry, in index order."""
        return [self._render_fragment("resume_grid", resumes=index.resumes)]

    def render_listing_error(self) -> List[RegionContent]:
        return [self._render_fragment("listing_error")]

    def render_preview_banner(self, page_path: str) -> List[RegionContent]:
        """Banner regions for a preview deployment path; empty for any other path."""
        branch = preview_branch(page_path)
        if branch is None:
            return []
        return [RegionContent("preview_branch", branch), RegionContent("preview_indicator")]

    # Resume page

    def render_resume(self, resume: Resume) -> List[RegionContent]:
        """
        Render every region of a résumé page.

        Regions whose source data is missing are left out of the result.

        Args:
            resume: Loaded résumé

        Returns:
            Region contents in page update order
        """
        regions: List[RegionContent] = []
        title = document_title(resume)
        if title is not None:
            regions.append(RegionContent("document_title", title))
        else:
            log_region_skipped("document_title", "name or title missing")

        regions += self.render_header(resume)
        regions += self.render_contact(resume)
        regions += self.render_sidebar_contact(resume)
        regions += self.render_profile_summary(resume)
        regions += self.render_experience(resume)
        regions += self.render_skills(resume)
        regions += self.render_education(resume)
        regions += self.render_certifications(resume)
        regions += self.render_projects(resume)
        regions += self.render_languages(resume)
        regions += self.render_sidebar_education(resume)
        regions += self.render_sidebar_languages(resume)
        regions += self.render_personal_skills(resume)
        return regions

    def render_resume_error(self) -> List[RegionContent]:
        """Not-found view replacing the whole résumé container, plus a matching title."""
        return [
            self._render_fragment("resume_error", listing_url=LISTING_URL),
            RegionContent("error_title", NOT_FOUND_TITLE),
        ]

    def render_header(self, resume: Resume) -> List[RegionContent]:
        """Name, title and location text in the primary, content and sidebar layouts."""
        targets = [
            ("header_name", resume.name),
            ("header_title", resume.title),
            ("header_location", resume.location),
            ("content_name", resume.name),
            ("content_title", resume.title),
            ("profile_name", resume.name),
            ("profile_title", resume.title),
        ]
        return [RegionContent(region_id, text) for region_id, text in targets if text is not None]

    def render_contact(self, resume: Resume) -> List[RegionContent]:
        if resume.contact is None:
            log_region_skipped("contact", "no contact section")
            return []
        return [
            self._render_fragment(
                "contact",
                contact=resume.contact,
                linkedin_display=strip_url_scheme_and_www(resume.contact.linkedin),
                portfolio_display=strip_url_scheme(resume.contact.portfolio),
            )
        ]

    def render_sidebar_contact(self, resume: Resume) -> List[RegionContent]:
        if resume.contact is None:
            log_region_skipped("sidebar_contact", "no contact section")
            return []
        return [
            self._render_fragment(
                "sidebar_contact",
                contact=resume.contact,
                location=resume.location,
                icons=CONTACT_ICONS,
                link_text=SIDEBAR_LINK_TEXT,
            )
        ]

    def render_profile_summary(self, resume: Resume) -> List[RegionContent]:
        if resume.profile_summary is None:
            return []
        return [RegionContent("profile_summary", resume.profile_summary)]

    def render_experience(self, resume: Resume) -> List[RegionContent]:
        if resume.experience is None:
            log_region_skipped("experience", "no experience section")
            return []
        return [self._render_fragment("experience", jobs=resume.experience)]

    def render_skills(self, resume: Resume) -> List[RegionContent]:
        """
        Four skill categories in fixed order, one tag per skill.

        Each tag carries a decorative level label unless show_skill_levels is off.
        Needs all four categories; otherwise the region is skipped.
        """
        if resume.skills is None or not resume.skills.is_complete:
            log_region_skipped("skills", "skills section missing or incomplete")
            return []

        categories = []
        for category_index, (attribute, heading) in enumerate(SKILL_CATEGORIES):
            skills = [
                {
                    "name": name,
                    "level": skill_level(category_index, item_index) if self.show_skill_levels else None,
                }
                for item_index, name in enumerate(getattr(resume.skills, attribute))
            ]
            categories.append({"heading": heading, "skills": skills})

        return [self._render_fragment("skills", categories=categories)]

    def render_education(self, resume: Resume) -> List[RegionContent]:
        if resume.education is None:
            log_region_skipped("education", "no education section")
            return []
        return [self._render_fragment("education", education=resume.education)]

    def render_certifications(self, resume: Resume) -> List[RegionContent]:
        if resume.certifications is None:
            log_region_skipped("certifications", "no certifications section")
            return []
        return [self._render_fragment("certifications", certifications=resume.certifications)]

    def render_projects(self, resume: Resume) -> List[RegionContent]:
        if resume.projects is None:
            log_region_skipped("projects", "no projects section")
            return []
        return [self._render_fragment("projects", projects=resume.projects)]

    def render_languages(self, resume: Resume) -> List[RegionContent]:
        if resume.languages is None:
            log_region_skipped("languages", "no languages section")
            return []
        return [self._render_fragment("languages", languages=resume.languages)]

    def render_sidebar_education(self, resume: Resume) -> List[RegionContent]:
        if resume.education is None:
            return []
        return [self._render_fragment("sidebar_education", education=resume.education)]

    def render_sidebar_languages(self, resume: Resume) -> List[RegionContent]:
        if resume.languages is None:
            return []
        return [self._render_fragment("sidebar_languages", languages=resume.languages)]

    def render_personal_skills(self, resume: Resume) -> List[RegionContent]:
        if resume.skills is None:
            log_region_skipped("personal_skills", "no skills section")
            return []
        return [self._render_fragment("personal_skills", skills=personal_skills(resume.skills))]


def region_ids(contents: Sequence[RegionContent]) -> List[str]:
    """Region ids of a render result, in order."""
    return [content.region_id for content in contents]
