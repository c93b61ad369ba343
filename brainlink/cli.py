"""CLI entrypoint for brainlink."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import BRAIN_DIR_ENV, find_brain_dir
from .models import BrainlinkError


def _setup_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _run(fn, *args, **kwargs) -> None:
    """Invoke a command body, turning brainlink errors into CLI errors."""
    try:
        exit_code = fn(*args, **kwargs)
    except BrainlinkError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@click.group()
@click.version_option(__version__, prog_name="brainlink")
@click.option(
    "--brain",
    "-b",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help=f"Path to the brain directory (defaults to ${BRAIN_DIR_ENV} or an auto-detected ./brain)",
)
@click.option("--verbose", is_flag=True, help="Log loading and graph construction details")
@click.pass_context
def cli(ctx: click.Context, brain: Path | None, verbose: bool) -> None:
    """brainlink - wiki-link resolution and link graphs for a Markdown brain.

    Documents live in one folder per category (journals, concepts,
    projects, research, books) and link to each other with [[wiki links]].
    """
    _setup_logging(verbose)

    ctx.ensure_object(dict)
    if brain is None:
        detected = find_brain_dir(Path.cwd())
        if detected is None:
            raise click.ClickException(f"Brain not found. Pass --brain /path/to/brain or set ${BRAIN_DIR_ENV}.")
        brain = detected

    if not brain.exists() or not brain.is_dir():
        raise click.BadParameter(f"Directory '{brain}' does not exist.", param_hint="--brain / -b")

    ctx.obj["brain"] = brain.resolve()


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "md", "rich", "dot"]),
    default="json",
    show_default=True,
    help="Output format (json is the node/edge payload for the graph view)",
)
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write output to a file")
@click.option("--top", type=int, default=25, show_default=True, help="How many nodes to show in summaries")
@click.pass_context
def graph(ctx: click.Context, fmt: str, out: Path | None, top: int) -> None:
    """Build the link graph of every document.

    Examples:

        brainlink graph --format md

        brainlink graph --out graph.json
    """
    from .commands.graph_cmd import run_graph

    _run(run_graph, ctx.obj["brain"], fmt=fmt, out=out, top=top)


@cli.command()
@click.argument("slug")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def backlinks(ctx: click.Context, slug: str, output_json: bool) -> None:
    """Show documents that link to SLUG, with context."""
    from .commands.links_cmd import run_backlinks

    _run(run_backlinks, ctx.obj["brain"], slug, output_json=output_json)


@cli.command()
@click.argument("slug")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def outlinks(ctx: click.Context, slug: str, output_json: bool) -> None:
    """Show the links SLUG makes and where they resolve."""
    from .commands.links_cmd import run_outlinks

    _run(run_outlinks, ctx.obj["brain"], slug, output_json=output_json)


@cli.command()
@click.argument("target")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def resolve(ctx: click.Context, target: str, output_json: bool) -> None:
    """Resolve a raw link TARGET the way [[TARGET]] would.

    Examples:

        brainlink resolve "Second Brain System"

        brainlink resolve 2026-01-29
    """
    from .commands.links_cmd import run_resolve

    _run(run_resolve, ctx.obj["brain"], target, output_json=output_json)


@cli.command()
@click.option(
    "--fail-on",
    type=click.Choice(["error", "warning"]),
    default="error",
    help="Exit with error if this level or higher found. Broken links are warnings, so only 'warning' fails on them.",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def lint(ctx: click.Context, fail_on: str, output_json: bool) -> None:
    """Check for broken links, partial title matches, and orphans."""
    from .commands.lint import run_lint

    _run(run_lint, ctx.obj["brain"], fail_on, output_json)


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def tags(ctx: click.Context, output_json: bool) -> None:
    """List frontmatter and inline #tags by usage."""
    from .commands.tags_cmd import run_tags

    _run(run_tags, ctx.obj["brain"], output_json=output_json)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
