"""Backlinks, outlinks, and resolve commands."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..vault.links import get_backlinks, get_outlinks
from ..vault.loader import load_brain
from ..vault.resolver import resolve_link_match


def run_backlinks(brain_path: Path, slug: str, *, output_json: bool = False) -> int:
    """List documents linking to `slug`."""
    config = load_config(brain_path)
    documents = load_brain(brain_path, config)
    backlinks = get_backlinks(slug, documents, radius=config.context_radius)

    if output_json:
        print(json.dumps([b.to_dict() for b in backlinks], indent=2))
        return 0

    console = Console()
    if not backlinks:
        console.print(f"No backlinks to {escape(slug)}", style="dim")
        return 0

    t = Table(title=f"Backlinks to {escape(slug)}", show_header=True, header_style="bold")
    t.add_column("Document", style="cyan", no_wrap=True)
    t.add_column("Title")
    t.add_column("Context", style="dim")
    for b in backlinks:
        t.add_row(escape(b.slug), escape(b.title), escape(b.context))
    console.print(t)
    return 0


def run_outlinks(brain_path: Path, slug: str, *, output_json: bool = False) -> int:
    """List the distinct links `slug` makes, resolved or not."""
    documents = load_brain(brain_path)
    outlinks = get_outlinks(slug, documents)

    if output_json:
        print(json.dumps([o.to_dict() for o in outlinks], indent=2))
        return 0

    console = Console()
    if not outlinks:
        console.print(f"No links in {escape(slug)}", style="dim")
        return 0

    t = Table(title=f"Links from {escape(slug)}", show_header=True, header_style="bold")
    t.add_column("Target")
    t.add_column("Resolves to", style="cyan")
    t.add_column("Status")
    for o in outlinks:
        status = "[green]ok[/green]" if o.exists else "[red]missing[/red]"
        t.add_row(escape(o.target), escape(o.resolved_slug or ""), status)
    console.print(t)
    return 0


def run_resolve(brain_path: Path, target: str, *, output_json: bool = False) -> int:
    """Show which document a raw link target resolves to.

    Returns 1 when nothing matches.
    """
    documents = load_brain(brain_path)
    match = resolve_link_match(target, documents)

    if output_json:
        payload = {
            "target": target,
            "slug": match.document.slug if match else None,
            "title": match.document.title if match else None,
            "strategy": match.strategy if match else None,
        }
        print(json.dumps(payload, indent=2))
        return 0 if match else 1

    console = Console()
    if match is None:
        console.print(f"'{escape(target)}' does not resolve to any document", style="bold red")
        return 1

    doc = match.document
    console.print(f"[cyan]{escape(doc.slug)}[/cyan] ({escape(doc.title)}) via {match.strategy} match")
    if match.strategy == "fuzzy":
        console.print("Partial title match; link by slug to be exact.", style="yellow")
    return 0
