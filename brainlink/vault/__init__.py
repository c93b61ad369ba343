"""Wiki-link parsing, resolution, and graph construction."""

from .graph import LinkGraph, build_graph
from .links import derive_links, get_backlinks, get_outlinks
from .loader import FileStore, MemoryStore, load_corpus, validate_corpus
from .parser import extract_links, normalize_target
from .resolver import resolve_link, resolve_link_match

__all__ = [
    "LinkGraph",
    "build_graph",
    "derive_links",
    "get_backlinks",
    "get_outlinks",
    "FileStore",
    "MemoryStore",
    "load_corpus",
    "validate_corpus",
    "extract_links",
    "normalize_target",
    "resolve_link",
    "resolve_link_match",
]
