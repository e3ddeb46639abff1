"""
FOLIO - Formatted Online Listing of Individual Overviews

Renders structured résumé documents (JSON) into static HTML pages: a listing page
that enumerates every available résumé and one detail page per résumé.

Architecture:
- Intake Context: Locating, loading and validating résumé JSON documents
- Templating Context: Pure projection of résumé data into named page regions
- Rendering Context: Writing regions into HTML documents and building the site
"""

__version__ = "0.1.0"
