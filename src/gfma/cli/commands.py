"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from gfma.config import Settings, load_config
from gfma.core.parse import load_document
from gfma.core.pipeline import run_build
from gfma.core.render import make_renderer
from gfma.core.rewrite import rewrite
from gfma.logging_config import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to build")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    stylesheet: Annotated[Optional[str], typer.Option("--stylesheet", help="Custom admonition CSS file")] = None,
    no_minify: Annotated[bool, typer.Option("--no-minify", help="Inject the stylesheet unminified")] = False,
    bare: Annotated[bool, typer.Option("--bare", help="Write HTML fragments instead of full pages")] = False,
    jobs: Annotated[Optional[int], typer.Option("--jobs", help="Worker threads for the rewrite phase")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Rewrite admonitions, render pages, and inject the admonition stylesheet."""
    settings = _settings(overrides={
        "output_dir": out, "parser_config": parser, "stylesheet": stylesheet,
        "minify_css": False if no_minify else None,
        "standalone": False if bare else None,
        "jobs": jobs,
        "log_level": "DEBUG" if verbose else None,
    })
    if not Path(path).exists():
        _fail(f"Path not found: {path}")

    try:
        result = run_build(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    except (ValueError, OSError) as e:
        _fail("Build failed", e)

    if not result.documents:
        typer.echo("No markdown files found.")
        raise typer.Exit(0)

    for src, dest in result.written:
        typer.echo(f"  {src} -> {dest}")
    typer.echo(
        f"Build complete - "
        f"{len(result.documents)} document(s), "
        f"{result.context.converted} with admonitions, "
        f"{result.injected} styled"
    )


def convert_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to convert")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the file's markdown body with admonitions rewritten to HTML."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        md = make_renderer(settings.parser_config)
        doc = load_document(path)
    except RuntimeError as e:
        _fail(str(e))
    except ValueError as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(rewrite(doc.content, md.render), nl=False)
