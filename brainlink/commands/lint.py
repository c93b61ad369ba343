"""Lint command implementation."""

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..vault.loader import load_brain
from ..vault.rules import LintResult, LinkRules


def run_lint(brain_path: Path, fail_on: str = "error", output_json: bool = False) -> int:
    """Run link lint checks on the brain.

    Args:
        brain_path: Path to the brain directory
        fail_on: Exit with error if this level or higher found ("error" or "warning").
            No current rule reports errors; broken links are warnings.
        output_json: Output results as JSON instead of human-readable

    Returns:
        Exit code (0 = success, 1 = failures found)
    """
    console = Console(stderr=True)

    console.print(f"Loading brain from {escape(str(brain_path))}...", style="dim")
    documents = load_brain(brain_path)
    results = LinkRules(documents).run_all()

    # Sort by level (errors first)
    level_order = {"error": 0, "warning": 1, "info": 2}
    results.sort(key=lambda r: (level_order.get(r.level, 99), r.slug, r.line or 0))

    counts = {"error": 0, "warning": 0, "info": 0}
    for r in results:
        counts[r.level] = counts.get(r.level, 0) + 1

    if output_json:
        payload = {
            "documents": len(documents),
            "counts": counts,
            "results": [r.to_dict() for r in results],
        }
        print(json.dumps(payload, indent=2))
    else:
        _print_human_output(console, results, counts, len(documents))

    if fail_on == "warning":
        if counts["error"] > 0 or counts["warning"] > 0:
            return 1
    elif counts["error"] > 0:
        return 1

    return 0


def _print_human_output(console: Console, results: list[LintResult], counts: dict, total: int) -> None:
    styles = {"error": "bold red", "warning": "yellow", "info": "dim"}
    for r in results:
        console.print(escape(str(r)), style=styles.get(r.level, ""))

    if results:
        console.print()
    summary = f"{total} documents: {counts['error']} errors, {counts['warning']} warnings, {counts['info']} info"
    console.print(summary, style="bold green" if not counts["warning"] and not counts["error"] else "bold")
