"""Data models for brain documents and derived link data."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Literal

# Document categories, one directory each in a filesystem brain
CATEGORIES = ("journals", "concepts", "projects", "research", "books")

# Resolution strategies, loosest last
Strategy = Literal["slug", "filename", "title", "fuzzy"]


class BrainlinkError(Exception):
    """Base class for all brainlink errors."""


class CorpusError(BrainlinkError, ValueError):
    """The corpus handed to the core is structurally invalid."""


class StorageError(BrainlinkError):
    """The storage collaborator failed to produce a corpus."""


class ConfigError(BrainlinkError, ValueError):
    """brainlink.toml is present but invalid."""


class DocumentNotFoundError(BrainlinkError, KeyError):
    """No document with the requested slug exists in the corpus."""

    def __str__(self) -> str:
        return f"Document not found: {self.args[0]}"


@dataclass(frozen=True)
class Document:
    """A single note, owned by storage and read-only to the core."""

    slug: str  # "<category>/<name>"
    title: str
    content: str  # raw markdown, source of truth for links
    category: str = ""
    tags: tuple[str, ...] = ()
    path: Path | None = None  # only set by filesystem storage

    @property
    def name(self) -> str:
        """Last path segment of the slug."""
        return self.slug.rsplit("/", 1)[-1]

    @classmethod
    def from_dict(cls, record: Mapping) -> "Document":
        """Build a document from a plain `{slug, title, category, content}` record."""
        missing = [key for key in ("slug", "title", "content") if key not in record]
        if missing:
            ident = record.get("slug", "<unknown>")
            raise CorpusError(f"Document {ident!r} is missing required field(s): {', '.join(missing)}")

        tags = record.get("tags") or ()
        if isinstance(tags, str):
            tags = (tags,)

        return cls(
            slug=record["slug"],
            title=record["title"],
            content=record["content"],
            category=record.get("category") or "",
            tags=tuple(tags),
        )


@dataclass(frozen=True)
class WikiLink:
    """One `[[target]]` or `[[target|alias]]` occurrence in a document."""

    raw: str  # full match including brackets
    target: str
    alias: str | None
    start: int
    end: int  # exclusive


@dataclass(frozen=True)
class LinkMatch:
    """A resolved document plus the rule that found it."""

    document: Document
    strategy: Strategy


@dataclass(frozen=True)
class ResolvedLink:
    target: str
    resolved_slug: str | None
    resolved_title: str | None
    exists: bool

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "resolvedSlug": self.resolved_slug,
            "resolvedTitle": self.resolved_title,
            "exists": self.exists,
        }


@dataclass(frozen=True)
class Backlink:
    slug: str
    title: str
    context: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DocumentLinks:
    """Backlinks and outlinks of a single document."""

    slug: str
    backlinks: list[Backlink] = field(default_factory=list)
    outlinks: list[ResolvedLink] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "slug": self.slug,
            "backlinks": [b.to_dict() for b in self.backlinks],
            "outlinks": [o.to_dict() for o in self.outlinks],
        }


@dataclass(frozen=True)
class GraphNode:
    id: str  # document slug
    title: str
    category: str
    link_count: int
    size: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "linkCount": self.link_count,
            "size": self.size,
        }


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target}
