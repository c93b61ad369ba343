"""Tag extraction and aggregation."""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models import Document

# "#tag" at line start or after whitespace; must start with a letter
TAG_PATTERN = re.compile(r"(?:^|\s)#([a-zA-Z][a-zA-Z0-9_-]*)")


@dataclass
class TagInfo:
    name: str
    count: int = 0
    documents: list[str] = field(default_factory=list)  # slugs

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count, "documents": list(self.documents)}


def extract_tags(content: str) -> list[str]:
    """Extract inline #tags, lower-cased and deduplicated in order."""
    tags = []
    for match in TAG_PATTERN.finditer(content):
        tag = match.group(1).lower()
        if tag not in tags:
            tags.append(tag)
    return tags


def document_tags(doc: Document) -> list[str]:
    """Frontmatter tags followed by inline tags, without repeats."""
    combined = [str(t).lower() for t in doc.tags] + extract_tags(doc.content)
    result = []
    for tag in combined:
        if tag not in result:
            result.append(tag)
    return result


def collect_tags(documents: Sequence[Document]) -> list[TagInfo]:
    """Aggregate tags across the corpus, most used first."""
    by_name: dict[str, TagInfo] = {}
    for doc in documents:
        for tag in document_tags(doc):
            info = by_name.setdefault(tag, TagInfo(name=tag))
            info.count += 1
            info.documents.append(doc.slug)

    # sorted() is stable, so ties keep first-appearance order
    return sorted(by_name.values(), key=lambda t: -t.count)
