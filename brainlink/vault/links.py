"""Backlink and outlink derivation for a single document."""

from collections.abc import Sequence

from ..models import Backlink, Document, DocumentLinks, DocumentNotFoundError, ResolvedLink
from .parser import extract_links
from .resolver import resolve_link

CONTEXT_RADIUS = 50


def find_document(slug: str, documents: Sequence[Document]) -> Document:
    """Get a document by slug or raise DocumentNotFoundError."""
    for doc in documents:
        if doc.slug == slug:
            return doc
    raise DocumentNotFoundError(slug)


def get_outlinks(slug: str, documents: Sequence[Document]) -> list[ResolvedLink]:
    """Resolve every distinct link target the document makes.

    Targets are deduplicated case-insensitively (first spelling wins) and
    keep first-seen order. Self-references are included. Unresolved targets
    are reported with `exists=False` and the raw target as slug.
    """
    source = find_document(slug, documents)

    seen = set()
    result = []
    for link in extract_links(source.content):
        key = link.target.lower()
        if key in seen:
            continue
        seen.add(key)

        resolved = resolve_link(link.target, documents)
        if resolved is not None:
            result.append(ResolvedLink(link.target, resolved.slug, resolved.title, True))
        else:
            result.append(ResolvedLink(link.target, link.target, None, False))
    return result


def get_backlinks(
    slug: str,
    documents: Sequence[Document],
    *,
    radius: int = CONTEXT_RADIUS,
) -> list[Backlink]:
    """Find documents that link to `slug`, in corpus order.

    Each referring document appears once, with context taken around its
    first link that resolves to the target.
    """
    target = find_document(slug, documents)
    # Resolution scoped to the one document we care about
    pool = [target]

    backlinks = []
    for doc in documents:
        if doc.slug == target.slug:
            continue
        for link in extract_links(doc.content):
            if resolve_link(link.target, pool) is None:
                continue
            backlinks.append(
                Backlink(
                    slug=doc.slug,
                    title=doc.title,
                    context=link_context(doc.content, link.start, link.end, radius=radius),
                )
            )
            break
    return backlinks


def link_context(content: str, start: int, end: int, *, radius: int = CONTEXT_RADIUS) -> str:
    """Excerpt of `content` around [start, end), flattened to one line.

    Ellipses mark the sides where the window was cut short of the text.
    """
    lo = max(0, start - radius)
    hi = min(len(content), end + radius)
    context = content[lo:hi]
    if lo > 0:
        context = "..." + context
    if hi < len(content):
        context = context + "..."
    return context.replace("\n", " ").strip()


def derive_links(
    slug: str,
    documents: Sequence[Document],
    *,
    radius: int = CONTEXT_RADIUS,
) -> DocumentLinks:
    """Backlinks and outlinks of one document over a corpus snapshot."""
    return DocumentLinks(
        slug=slug,
        backlinks=get_backlinks(slug, documents, radius=radius),
        outlinks=get_outlinks(slug, documents),
    )
