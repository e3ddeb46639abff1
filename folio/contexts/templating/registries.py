"""
Templating Registries

Centralized registries for loading and caching region fragment templates and
the region configuration table.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf

from folio.contexts.templating.exceptions import UnknownRegionError

load_dotenv()
TEMPLATE_PATH = Path(os.getenv("FOLIO_TEMPLATE_PATH", Path(__file__).parent / "template"))

# Write modes understood by the rendering context's PageContext
REGION_MODES = {"text", "html", "html_keep_heading", "reveal", "title"}


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 fragment templates for page regions.

    Templates are stored in {FOLIO_TEMPLATE_PATH}/regions/{template_name}.html.jinja
    and are rendered with HTML autoescaping, so résumé text is always inserted
    verbatim as text, never as markup.
    """

    def __init__(self, regions_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            regions_base_path: Base path for fragment templates. Defaults to
                           {FOLIO_TEMPLATE_PATH}/regions
        """
        if regions_base_path is None:
            regions_base_path = TEMPLATE_PATH / "regions"

        self.regions_base_path = regions_base_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(regions_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            template_name: Name of the fragment (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        template_path = f"{template_name}.html.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{template_name}' at {self.regions_base_path / template_path}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        """
        Get the file path for a fragment template.

        Args:
            template_name: Name of the fragment (e.g., 'experience')

        Returns:
            Path to template file
        """
        return self.regions_base_path / f"{template_name}.html.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            template_name: Name of the fragment

        Returns:
            True if cached, False otherwise
        """
        return template_name in self._cache


class RegionConfigRegistry:
    """
    Registry for the region configuration table.

    The table lives in {FOLIO_TEMPLATE_PATH}/regions.yaml and maps each region id
    to where it is written in the page and how:

        experience:
          selector: .experience       # CSS selector, first match wins
          mode: html_keep_heading     # text | html | html_keep_heading | reveal | title
          heading: h3                 # html_keep_heading only
          template: experience        # fragment template (html modes)
    """

    def __init__(self, config_path: Path = None):
        """
        Initialize the region config registry.

        Args:
            config_path: Path to regions.yaml. Defaults to {FOLIO_TEMPLATE_PATH}/regions.yaml
        """
        if config_path is None:
            config_path = TEMPLATE_PATH / "regions.yaml"

        self.config_path = config_path
        self._regions: Dict[str, Dict[str, Any]] = None

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if self._regions is None:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Region config not found at {self.config_path}")

            config = OmegaConf.load(self.config_path)
            regions = OmegaConf.to_container(config, resolve=True)

            for region_id, region in regions.items():
                if region.get("mode") not in REGION_MODES:
                    raise ValueError(
                        f"Region '{region_id}' has invalid mode {region.get('mode')!r}. "
                        f"Valid modes: {sorted(REGION_MODES)}"
                    )
                if not region.get("selector"):
                    raise ValueError(f"Region '{region_id}' has no selector")

            self._regions = regions
        return self._regions

    def get_config(self, region_id: str) -> Dict[str, Any]:
        """
        Get the configuration of one region.

        Args:
            region_id: Region identifier (e.g., 'skills')

        Returns:
            Dict with selector, mode and optional heading/template

        Raises:
            UnknownRegionError: If the region is not in the table
        """
        regions = self._load()
        if region_id not in regions:
            raise UnknownRegionError(f"Region '{region_id}' not found in {self.config_path}")
        return regions[region_id]

    def region_ids(self) -> list:
        """All configured region ids, in file order."""
        return list(self._load())

    def clear_cache(self):
        """Forget the loaded table so the next lookup re-reads the file."""
        self._regions = None
