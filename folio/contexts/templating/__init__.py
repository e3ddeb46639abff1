"""
Templating Context

Responsibilities:
- Projects résumé and index data into named page regions (pure, page-independent)
- Manages HTML fragment templates and the region configuration table
- Owns fixed display decisions (skill category order, level labels, icons)

Owns: Region contents, fragment templates, regions.yaml, page template shells
Never: Loads documents or writes into a page
"""

from folio.contexts.templating.region_renderer import (
    RegionContent,
    RegionRenderer,
    document_title,
    personal_skills,
    preview_branch,
    skill_level,
)
from folio.contexts.templating.registries import RegionConfigRegistry, TemplateRegistry

__all__ = [
    # Pure projection
    "RegionContent",
    "RegionRenderer",
    "document_title",
    "personal_skills",
    "preview_branch",
    "skill_level",
    # Registries
    "TemplateRegistry",
    "RegionConfigRegistry",
]
