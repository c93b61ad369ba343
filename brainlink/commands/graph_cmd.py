"""Graph command - inspect the brain's link structure."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..vault.graph import LinkGraph, build_graph
from ..vault.loader import load_brain


def run_graph(
    brain_path: Path,
    *,
    fmt: str = "json",
    out: Path | None = None,
    top: int = 25,
) -> int:
    """Output the link graph, or a summary of it, for a brain directory."""
    console = Console(stderr=True)

    config = load_config(brain_path)
    documents = load_brain(brain_path, config)
    graph = build_graph(
        documents,
        size_min=config.node_size_min,
        size_max=config.node_size_max,
        size_step=config.node_size_step,
    )

    title = f"Link graph ({brain_path.name})"

    if fmt == "rich":
        payload = _summarize_graph(graph, title=title, top=top)
        if out:
            rich_console = Console(record=True)
            _print_rich(payload, console=rich_console)
            out.write_text(rich_console.export_text(), encoding="utf-8")
            console.print(f"Wrote graph output to {out}", style="green")
        else:
            _print_rich(payload, console=Console())
        return 0

    text: str
    if fmt == "json":
        text = json.dumps(graph.to_dict(), indent=2) + "\n"
    elif fmt == "dot":
        text = _to_dot(graph, title=title)
    else:
        text = _to_markdown(_summarize_graph(graph, title=title, top=top))

    if out:
        out.write_text(text, encoding="utf-8")
        console.print(f"Wrote graph output to {out}", style="green")
    else:
        print(text, end="" if text.endswith("\n") else "\n")

    return 0


def _summarize_graph(graph: LinkGraph, *, title: str, top: int) -> dict:
    rows = [
        {"id": n.id, "title": n.title, "category": n.category, "link_count": n.link_count}
        for n in graph.nodes
    ]
    rows.sort(key=lambda r: (-r["link_count"], r["id"]))

    by_category: dict[str, int] = {}
    for n in graph.nodes:
        key = n.category or "uncategorized"
        by_category[key] = by_category.get(key, 0) + 1

    return {
        "title": title,
        "node_count": len(graph.nodes),
        "edge_count": len(graph.edges),
        "isolated_count": len(graph.isolated()),
        "categories": dict(sorted(by_category.items())),
        "most_connected": rows[: max(0, top)],
    }


def _to_markdown(payload: dict) -> str:
    lines: list[str] = []
    lines.append(f"## {payload['title']}")
    lines.append("")
    lines.append(f"- Nodes: {payload['node_count']}")
    lines.append(f"- Edges: {payload['edge_count']}")
    lines.append(f"- Isolated: {payload['isolated_count']}")
    lines.append("")

    lines.append("### Categories")
    lines.append("")
    lines.append("| Category | Documents |")
    lines.append("|---|---:|")
    for category, count in payload["categories"].items():
        lines.append(f"| {category} | {count} |")
    lines.append("")

    lines.append("### Most connected")
    lines.append("")
    lines.append("| Document | Title | Links |")
    lines.append("|---|---|---:|")
    for r in payload["most_connected"]:
        lines.append(f"| `{r['id']}` | {r['title']} | {r['link_count']} |")
    lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _print_rich(payload: dict, *, console: Console) -> None:
    console.print(f"[bold]{payload['title']}[/bold]")
    console.print(
        f"Nodes: {payload['node_count']}  Edges: {payload['edge_count']}  "
        f"Isolated: {payload['isolated_count']}"
    )
    console.print()

    t = Table(title="Most connected", show_header=True, header_style="bold")
    t.add_column("Document", style="cyan", no_wrap=True)
    t.add_column("Title")
    t.add_column("Links", justify="right")
    for r in payload["most_connected"]:
        t.add_row(escape(str(r["id"])), escape(str(r["title"])), str(r["link_count"]))
    console.print(t)
    console.print()


def _to_dot(graph: LinkGraph, *, title: str) -> str:
    def esc(s: str) -> str:
        return s.replace("\\", "\\\\").replace('"', '\\"')

    category_colors = {
        "journals": "#8ecae6",
        "concepts": "#f9d65c",
        "projects": "#90be6d",
        "research": "#f4a261",
        "books": "#b5179e",
    }

    lines = [
        "graph brain {",
        f'  label="{esc(title)}";',
        "  labelloc=t;",
        "  bgcolor=\"#0f1115\";",
        "  graph [fontname=\"Helvetica\"];",
        "  node [fontname=\"Helvetica\", fontsize=10, style=filled, color=\"#3a4154\", fontcolor=\"#0f1115\"];",
        "  edge [color=\"#3a4154\", penwidth=0.8];",
    ]

    for node in sorted(graph.nodes, key=lambda n: n.id):
        fill = category_colors.get(node.category, "#9aa0a6")
        # node.size is a display radius in px; dot widths are inches
        width = node.size * 2 / 72
        lines.append(
            f'  "{esc(node.id)}" [label="{esc(node.title)}"; fillcolor="{fill}"; width="{width:.2f}"];'
        )

    for edge in sorted(graph.edges, key=lambda e: (e.source, e.target)):
        lines.append(f'  "{esc(edge.source)}" -- "{esc(edge.target)}";')

    lines.append("}")
    return "\n".join(lines) + "\n"
