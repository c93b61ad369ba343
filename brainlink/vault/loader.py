"""Document storage backends and corpus loading."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Protocol

import frontmatter
import yaml

from ..config import BrainConfig, load_config
from ..models import CATEGORIES, CorpusError, Document, StorageError

logger = logging.getLogger(__name__)


class DocumentSource(Protocol):
    """Anything that can hand over a full corpus snapshot."""

    def list_documents(self) -> list[Document]: ...


def validate_corpus(documents: Iterable[Document]) -> list[Document]:
    """Check a corpus snapshot and return it as a list.

    Raises CorpusError on the first malformed document or duplicate slug.
    """
    corpus = list(documents)
    seen: set[str] = set()
    for index, doc in enumerate(corpus):
        if not isinstance(doc, Document):
            raise CorpusError(f"Corpus entry {index} is not a Document: {type(doc).__name__}")
        for name in ("slug", "title", "content", "category"):
            if not isinstance(getattr(doc, name), str):
                raise CorpusError(f"Document {doc.slug!r} has a non-string {name}")
        if not doc.slug:
            raise CorpusError(f"Corpus entry {index} has an empty slug")
        if doc.slug in seen:
            raise CorpusError(f"Duplicate slug in corpus: {doc.slug}")
        seen.add(doc.slug)
    return corpus


class MemoryStore:
    """In-memory corpus, for callers that already hold the records."""

    def __init__(self, documents: Iterable[Document | Mapping]):
        self._documents = validate_corpus(
            doc if isinstance(doc, Document) else Document.from_dict(doc) for doc in documents
        )

    def list_documents(self) -> list[Document]:
        return list(self._documents)


class FileStore:
    """Markdown files with YAML frontmatter, one directory per category.

    `<root>/concepts/dopamine.md` becomes slug `concepts/dopamine`.
    """

    def __init__(self, root: Path, categories: Sequence[str] = CATEGORIES):
        self.root = root
        self.categories = tuple(categories)

    def list_documents(self) -> list[Document]:
        documents = []
        for category in self.categories:
            category_path = self.root / category
            if not category_path.is_dir():
                logger.debug("Skipping %s (directory not found)", category_path)
                continue

            for md_file in sorted(category_path.glob("*.md")):
                if md_file.name.startswith("."):
                    continue
                documents.append(self._load(md_file, category))

        logger.debug("Loaded %d documents from %s", len(documents), self.root)
        return documents

    def _load(self, path: Path, category: str) -> Document:
        try:
            post = frontmatter.load(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise StorageError(f"Failed to load {path}: {e}") from e

        fm = post.metadata
        title = fm.get("title") or path.stem.replace("-", " ")

        tags = fm.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        elif not isinstance(tags, list):
            raise StorageError(f"Failed to load {path}: tags must be a list")

        return Document(
            slug=f"{category}/{path.stem}",
            title=str(title),
            content=post.content,
            category=category,
            tags=tuple(str(t) for t in tags),
            path=path,
        )


def load_corpus(source: DocumentSource) -> list[Document]:
    """Fetch one corpus snapshot from storage and validate it.

    Storage failures surface as StorageError before any link work starts.
    """
    try:
        documents = source.list_documents()
    except OSError as e:
        raise StorageError(f"Failed to list documents: {e}") from e
    return validate_corpus(documents)


def load_brain(root: Path, config: BrainConfig | None = None) -> list[Document]:
    """Load and validate every document under a brain directory."""
    config = config or load_config(root)
    return load_corpus(FileStore(root, config.categories))
