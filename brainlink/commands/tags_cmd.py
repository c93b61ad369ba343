"""Tags command - list tags used across the brain."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..vault.loader import load_brain
from ..vault.tags import collect_tags


def run_tags(brain_path: Path, *, output_json: bool = False) -> int:
    documents = load_brain(brain_path)
    tags = collect_tags(documents)

    if output_json:
        print(json.dumps([t.to_dict() for t in tags], indent=2))
        return 0

    console = Console()
    if not tags:
        console.print("No tags found", style="dim")
        return 0

    t = Table(title="Tags", show_header=True, header_style="bold")
    t.add_column("Tag", style="cyan", no_wrap=True)
    t.add_column("Count", justify="right")
    t.add_column("Documents", style="dim")
    for tag in tags:
        t.add_row(f"#{tag.name}", str(tag.count), escape(", ".join(tag.documents)))
    console.print(t)
    return 0
