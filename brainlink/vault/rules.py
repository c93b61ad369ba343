"""Lint rules for link hygiene across a brain."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from ..models import Document
from .graph import LinkGraph, build_graph
from .parser import extract_links
from .resolver import resolve_link_match

RULE_EXPLANATIONS = {
    "broken-link": "A [[link]] whose target matches no document by slug, file name, or title.",
    "fuzzy-link": (
        "A [[link]] that only resolved through substring title matching. "
        "Overlapping titles can send it to the wrong document; link by slug to be exact."
    ),
    "orphan": "A document with no links in or out; it shows up as an isolated graph node.",
}


@dataclass
class LintResult:
    """A single lint finding."""

    level: Literal["error", "warning", "info"]
    rule: str
    slug: str
    message: str
    line: int | None = None

    def __str__(self) -> str:
        loc = self.slug
        if self.line:
            loc += f":{self.line}"
        return f"{self.level.upper()}: [{self.rule}] {loc} - {self.message}"

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "rule": self.rule,
            "slug": self.slug,
            "message": self.message,
            "line": self.line,
        }


def _line_of(content: str, offset: int) -> int:
    return content.count("\n", 0, offset) + 1


class LinkRules:
    """Collection of link lint rules over one corpus snapshot."""

    def __init__(self, documents: Sequence[Document], graph: LinkGraph | None = None):
        self.documents = documents
        self.graph = graph if graph is not None else build_graph(documents)

    def run_all(self) -> list[LintResult]:
        """Run all lint checks and return findings."""
        results = []
        results.extend(self.check_link_targets())
        results.extend(self.check_orphans())
        return results

    def check_link_targets(self) -> list[LintResult]:
        """Flag unresolvable links (warning) and fuzzy-only matches (info).

        Each distinct target is reported once per document, at its first line.
        """
        results = []
        for doc in self.documents:
            seen = set()
            for link in extract_links(doc.content):
                key = link.target.lower()
                if key in seen:
                    continue
                seen.add(key)

                match = resolve_link_match(link.target, self.documents)
                line = _line_of(doc.content, link.start)
                if match is None:
                    results.append(
                        LintResult(
                            level="warning",
                            rule="broken-link",
                            slug=doc.slug,
                            message=f"Link to non-existent document '{link.target}'",
                            line=line,
                        )
                    )
                elif match.strategy == "fuzzy":
                    results.append(
                        LintResult(
                            level="info",
                            rule="fuzzy-link",
                            slug=doc.slug,
                            message=(
                                f"'{link.target}' resolved by partial title match to "
                                f"'{match.document.slug}' ({match.document.title})"
                            ),
                            line=line,
                        )
                    )
        return results

    def check_broken_links(self) -> list[LintResult]:
        return [r for r in self.check_link_targets() if r.rule == "broken-link"]

    def check_fuzzy_links(self) -> list[LintResult]:
        return [r for r in self.check_link_targets() if r.rule == "fuzzy-link"]

    def check_orphans(self) -> list[LintResult]:
        """Check for documents with no connections at all."""
        return [
            LintResult(
                level="info",
                rule="orphan",
                slug=node.id,
                message="Document has no links to or from other documents",
            )
            for node in self.graph.isolated()
        ]
