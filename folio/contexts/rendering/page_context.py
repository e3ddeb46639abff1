"""
Page Context

Explicit, headless stand-in for a browser page: an HTML document (parsed with
BeautifulSoup) plus the path it is served at. Region contents are written into
the document according to the region configuration table.

A region whose container is absent from the document is skipped, never an error.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

from folio.contexts.rendering.logger import _log_debug
from folio.contexts.templating.region_renderer import RegionContent
from folio.contexts.templating.registries import TEMPLATE_PATH, RegionConfigRegistry

PAGES_PATH = TEMPLATE_PATH / "pages"

HTML_PARSER = "html.parser"


class PageContext:
    """
    An HTML document being rendered, and the path it will be served at.

    Attributes:
        path: Page path (e.g., "/resumes/jane-doe/"); drives identifier
              resolution and preview detection
        soup: Parsed document
    """

    def __init__(
        self,
        html: str,
        path: str = "/",
        region_config_registry: RegionConfigRegistry = None,
    ):
        self.path = path
        self.soup = BeautifulSoup(html, HTML_PARSER)
        self.region_config_registry = region_config_registry or RegionConfigRegistry()

    @classmethod
    def from_file(cls, html_path: Path, path: str = "/", **kwargs) -> "PageContext":
        """Create a context from an HTML file on disk."""
        return cls(Path(html_path).read_text(encoding="utf-8"), path=path, **kwargs)

    @classmethod
    def from_page_template(cls, page_name: str, path: str = "/", **kwargs) -> "PageContext":
        """
        Create a context from a packaged page shell.

        Args:
            page_name: "listing" or "resume"
            path: Page path the document will be served at

        Raises:
            FileNotFoundError: If the page shell does not exist
        """
        page_path = PAGES_PATH / f"{page_name}.html"
        if not page_path.exists():
            raise FileNotFoundError(f"Page template '{page_name}' not found at {page_path}")
        return cls.from_file(page_path, path=path, **kwargs)

    @property
    def title(self) -> Optional[str]:
        """Current document title, or None if the document has no <title>."""
        return self.soup.title.get_text() if self.soup.title else None

    def select(self, selector: str) -> Optional[Tag]:
        """First element matching a CSS selector, or None."""
        return self.soup.select_one(selector)

    def find_region(self, region_id: str) -> Optional[Tag]:
        """Container element of a configured region, or None if the page lacks it."""
        config = self.region_config_registry.get_config(region_id)
        return self.select(config["selector"])

    def has_region(self, region_id: str) -> bool:
        return self.find_region(region_id) is not None

    def apply(self, region: RegionContent) -> bool:
        """
        Write one region's content into the document.

        Overwrites whatever the region held before, so applying the same region
        twice leaves only the second content.

        Args:
            region: Region content from the templating context

        Returns:
            True if written, False if the region's container is absent
        """
        config = self.region_config_registry.get_config(region.region_id)
        mode = config["mode"]

        if mode == "title":
            return self._set_title(region)

        element = self.select(config["selector"])
        if element is None:
            _log_debug(f"Region '{region.region_id}' not on page ({config['selector']}), skipped")
            return False

        if mode == "text":
            element.string = region.content
        elif mode == "html":
            element.clear()
            self._append_fragment(element, region.content)
        elif mode == "html_keep_heading":
            heading = element.find(config.get("heading", "h3"))
            element.clear()
            if heading is not None:
                element.append(heading)
            self._append_fragment(element, region.content)
        elif mode == "reveal":
            self._reveal(element)

        return True

    def apply_all(self, regions: Iterable[RegionContent]) -> List[str]:
        """
        Apply regions in order.

        Returns:
            Ids of the regions that were written
        """
        return [region.region_id for region in regions if self.apply(region)]

    def to_html(self) -> str:
        """Serialize the current document."""
        return str(self.soup)

    def _append_fragment(self, element: Tag, html: str) -> None:
        fragment = BeautifulSoup(html, HTML_PARSER)
        for child in list(fragment.contents):
            element.append(child.extract())

    def _reveal(self, element: Tag) -> None:
        # Drop any display declaration, keep the rest of the inline style
        declarations = [
            declaration.strip()
            for declaration in element.get("style", "").split(";")
            if declaration.strip() and not declaration.strip().startswith("display")
        ]
        declarations.append("display: block")
        element["style"] = "; ".join(declarations) + ";"

    def _set_title(self, region: RegionContent) -> bool:
        title = self.soup.title
        if title is None:
            if self.soup.head is None:
                _log_debug(f"Region '{region.region_id}': document has no <head>, skipped")
                return False
            title = self.soup.new_tag("title")
            self.soup.head.append(title)
        title.string = region.content
        return True
