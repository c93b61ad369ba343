"""Wiki-link resolution against a document corpus.

Authors type links loosely: by full slug, by bare file name, or by title.
Resolution therefore walks a cascade of increasingly permissive rules and
stops at the first rule that matches anything:

1. slug      - normalized target equals the document slug
2. filename  - normalized target (or the raw target, lower-cased with
               whitespace turned into hyphens) equals the last slug segment
3. title     - case-insensitive title equality
4. fuzzy     - case-insensitive substring, in either direction

Within a rule the first document in corpus order wins. The fuzzy rule can
pick an unintended document when titles overlap (a note titled "Plan"
matches any target containing "plan"); that behavior is kept as-is and
surfaced by the `fuzzy-link` lint rule instead.
"""

import re
from collections.abc import Iterable, Sequence

from ..models import Document, LinkMatch
from .parser import normalize_target

_WHITESPACE = re.compile(r"\s+")


def resolve_link_match(target: str, documents: Sequence[Document]) -> LinkMatch | None:
    """Resolve a raw link target, reporting which rule matched."""
    normalized = normalize_target(target)
    lowered = target.lower()
    hyphenated = _WHITESPACE.sub("-", lowered)

    doc = _first(documents, lambda d: d.slug == normalized)
    if doc is not None:
        return LinkMatch(doc, "slug")

    doc = _first(documents, lambda d: d.name in (normalized, hyphenated))
    if doc is not None:
        return LinkMatch(doc, "filename")

    doc = _first(documents, lambda d: d.title.lower() == lowered)
    if doc is not None:
        return LinkMatch(doc, "title")

    doc = _first(documents, lambda d: lowered in d.title.lower() or d.title.lower() in lowered)
    if doc is not None:
        return LinkMatch(doc, "fuzzy")

    return None


def resolve_link(target: str, documents: Sequence[Document]) -> Document | None:
    """Find the document a raw link target points at, or None."""
    match = resolve_link_match(target, documents)
    return match.document if match else None


def _first(documents: Iterable[Document], predicate) -> Document | None:
    for doc in documents:
        if predicate(doc):
            return doc
    return None
