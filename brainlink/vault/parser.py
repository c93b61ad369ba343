"""Markdown parsing utilities for wiki-links and link targets."""

import re

from ..models import WikiLink

# Match [[target]] and [[target|alias]]
WIKILINK_PATTERN = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# ASCII word characters only; other letters are dropped
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")


def extract_links(content: str) -> list[WikiLink]:
    """Extract all wiki-link occurrences from content, in document order.

    Every call scans from the start of `content`; nothing is carried over
    between calls. Unclosed brackets produce no match.
    """
    links = []
    for match in WIKILINK_PATTERN.finditer(content):
        alias = match.group(2)
        links.append(
            WikiLink(
                raw=match.group(0),
                target=match.group(1).strip(),
                alias=alias.strip() if alias is not None else None,
                start=match.start(),
                end=match.end(),
            )
        )
    return links


def normalize_target(target: str) -> str:
    """Normalize a wiki-link target to a slug candidate.

    - "Document Name" -> "document-name"
    - "concepts/second-brain-system" -> "concepts/second-brain-system"
    - "2026-01-29" -> "journals/2026-01-29" (bare dates are journal entries)
    - "Café" -> "caf"
    """
    # Already category-qualified
    if "/" in target:
        return target.lower().strip()

    if DATE_PATTERN.fullmatch(target):
        return f"journals/{target}"

    slug = _NON_SLUG_CHARS.sub("", target.lower())
    slug = _WHITESPACE.sub("-", slug).strip()
    # "2026-01-29!" must land where a second pass would put it
    if DATE_PATTERN.fullmatch(slug):
        return f"journals/{slug}"
    return slug


def slugify_title(category: str, title: str) -> str:
    """Build a new document slug from its category and title."""
    name = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return f"{category}/{name}"
