#!/usr/bin/env python3
"""
Static Site Build CLI

Renders the résumé listing page and every résumé detail page from JSON documents.

Commands:
    build           - Build the whole site into an output directory
    render-listing  - Render only the listing page
    render-resume   - Render a single résumé page
    check           - Report which sections each listed résumé would leave out

Examples:\n

    build_site.py build                                     # data/ -> outs/site/

    build_site.py build --data https://example.com/data     # Documents from a base URL

    build_site.py build --preview-branch feature-x          # Preview deployment

    build_site.py render-resume /resumes/jane-doe/          # Print one page

    build_site.py check                                     # Spot incomplete résumés
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.rendering import (
    PageContext,
    build_site,
    check_site,
    render_listing_page,
    render_resume_page,
    site_root_path,
)
from folio.contexts.intake import DocumentSource, DocumentUnavailableError
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render résumé JSON documents into a static HTML site",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _emit_page(context: PageContext, output: Optional[Path]) -> None:
    """Write a rendered page to a file, or to stdout when no file is given."""
    if output is None:
        typer.echo(context.to_html())
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(context.to_html(), encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)


@app.command("build")
def build_command(
    data: Annotated[
        Optional[str],
        typer.Option(
            "--data",
            "-d",
            help="Data directory or base URL (default: FOLIO_DATA_PATH)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output directory (default: FOLIO_SITE_PATH)",
        ),
    ] = None,
    preview_branch: Annotated[
        Optional[str],
        typer.Option(
            "--preview-branch",
            "-p",
            help="Build for a preview deployment served under /preview/<branch>/ (absolute entry urls are re-rooted there)",
        ),
    ] = None,
):
    """
    Build the listing page and one page per listed résumé.

    Pages whose document cannot be loaded are still written with their error
    view; the command exits non-zero if any page failed.

    Examples:\n

        $ build_site.py build                                  # Default locations

        $ build_site.py build -d tests/fixtures -o /tmp/site   # Custom locations

        $ build_site.py build --preview-branch feature-x       # Preview build
    """
    typer.secho(f"\nBuilding site (root {site_root_path(preview_branch)})", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    result = build_site(
        data_location=data,
        output_dir=output,
        preview_branch=preview_branch,
        log_dir=LOGS_PATH / f"build_{now()}",
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Site built", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho("✗ Site built with failures", fg=typer.colors.RED, bold=True)
        if result.error:
            typer.secho(f"  Listing: {result.error}", fg=typer.colors.RED)
        for failed in result.failed_resumes:
            typer.secho(f"  - {failed}", fg=typer.colors.RED)

    typer.echo(f"  Pages written: {len(result.pages_written)}")
    typer.echo(f"  Output: {result.output_dir}")
    typer.echo(f"  Time: {result.time_s:.2f}s")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("render-listing")
def render_listing_command(
    path: Annotated[
        str,
        typer.Argument(help="Path the page is served at (drives preview detection)"),
    ] = "/index.html",
    data: Annotated[
        Optional[str],
        typer.Option("--data", "-d", help="Data directory or base URL"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the page here instead of stdout"),
    ] = None,
):
    """
    Render the listing page.

    Examples:\n

        $ build_site.py render-listing                              # Print to stdout

        $ build_site.py render-listing /preview/feature-x/ -o x.html  # Preview page
    """
    context = PageContext.from_page_template("listing", path=path)
    result = render_listing_page(context, DocumentSource(data))
    _emit_page(context, output)

    if not result.success:
        typer.secho(f"✗ {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("render-resume")
def render_resume_command(
    path: Annotated[
        str,
        typer.Argument(help="Path the page is served at, e.g. /resumes/jane-doe/"),
    ],
    data: Annotated[
        Optional[str],
        typer.Option("--data", "-d", help="Data directory or base URL"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the page here instead of stdout"),
    ] = None,
):
    """
    Render a single résumé page.

    The résumé identifier is taken from the page path.

    Examples:\n

        $ build_site.py render-resume /resumes/jane-doe/

        $ build_site.py render-resume /resumes/jane-doe/index.html -o jane.html
    """
    context = PageContext.from_page_template("resume", path=path)
    result = render_resume_page(context, DocumentSource(data))
    _emit_page(context, output)

    if not result.success:
        typer.secho(f"✗ {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("check")
def check_command(
    data: Annotated[
        Optional[str],
        typer.Option("--data", "-d", help="Data directory or base URL"),
    ] = None,
):
    """
    Load every listed résumé and report what its page would leave out.

    Nothing is written.

    Examples:\n

        $ build_site.py check

        $ build_site.py check --data https://example.com/data
    """
    try:
        checks = check_site(data_location=data)
    except DocumentUnavailableError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    failed = 0
    for check in checks:
        label = check.resume_id or check.url
        if not check.loaded:
            failed += 1
            typer.secho(f"✗ {label}: {check.error}", fg=typer.colors.RED)
        elif check.skipped_regions:
            typer.secho(f"! {label}", fg=typer.colors.YELLOW)
            if check.skipped_sections:
                typer.echo(f"    Incomplete sections: {', '.join(check.skipped_sections)}")
            typer.echo(f"    Regions left out: {', '.join(check.skipped_regions)}")
        else:
            typer.secho(f"✓ {label}", fg=typer.colors.GREEN)

    typer.echo(f"\n{len(checks)} resumes checked, {failed} unavailable")
    raise typer.Exit(code=0 if failed == 0 else 1)


if __name__ == "__main__":
    app()
