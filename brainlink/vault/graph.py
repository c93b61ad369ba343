"""Link graph construction over a whole corpus."""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models import Document, GraphEdge, GraphNode
from .parser import extract_links
from .resolver import resolve_link

logger = logging.getLogger(__name__)

NODE_SIZE_MIN = 4
NODE_SIZE_MAX = 20
NODE_SIZE_STEP = 2


@dataclass
class LinkGraph:
    """Deduplicated, undirected-for-display graph of a corpus."""

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def node(self, slug: str) -> GraphNode | None:
        for n in self.nodes:
            if n.id == slug:
                return n
        return None

    def neighbors(self, slug: str) -> set[str]:
        """Slugs sharing an edge with `slug`, regardless of direction."""
        result = set()
        for edge in self.edges:
            if edge.source == slug:
                result.add(edge.target)
            elif edge.target == slug:
                result.add(edge.source)
        return result

    def isolated(self) -> list[GraphNode]:
        return [n for n in self.nodes if n.link_count == 0]

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


def node_size(
    link_count: int,
    *,
    minimum: int = NODE_SIZE_MIN,
    maximum: int = NODE_SIZE_MAX,
    step: int = NODE_SIZE_STEP,
) -> int:
    """Display radius for a node, growing with its connections."""
    return max(minimum, min(maximum, minimum + link_count * step))


def build_graph(
    documents: Sequence[Document],
    *,
    size_min: int = NODE_SIZE_MIN,
    size_max: int = NODE_SIZE_MAX,
    size_step: int = NODE_SIZE_STEP,
) -> LinkGraph:
    """Build the node/edge graph of a corpus.

    A link in either direction between two documents yields one edge, and
    self-links yield none. `link_count` counts distinct connections, not
    link occurrences. Every document becomes a node, isolated or not.
    """
    graph = LinkGraph()
    seen: set[tuple[str, str]] = set()
    link_counts: Counter[str] = Counter()

    for doc in documents:
        for link in extract_links(doc.content):
            resolved = resolve_link(link.target, documents)
            if resolved is None or resolved.slug == doc.slug:
                continue

            pair = (doc.slug, resolved.slug)
            if pair in seen or pair[::-1] in seen:
                continue
            seen.add(pair)

            graph.edges.append(GraphEdge(source=doc.slug, target=resolved.slug))
            link_counts[doc.slug] += 1
            link_counts[resolved.slug] += 1

    for doc in documents:
        count = link_counts[doc.slug]
        graph.nodes.append(
            GraphNode(
                id=doc.slug,
                title=doc.title,
                category=doc.category,
                link_count=count,
                size=node_size(count, minimum=size_min, maximum=size_max, step=size_step),
            )
        )

    logger.debug("Built graph with %d nodes and %d edges", len(graph.nodes), len(graph.edges))
    return graph
