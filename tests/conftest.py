"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from brainlink.models import Document
from brainlink.vault.graph import LinkGraph, build_graph
from brainlink.vault.loader import load_brain


@pytest.fixture
def fixture_brain_path() -> Path:
    """Path to the minimal fixture brain."""
    return Path(__file__).parent / "fixtures" / "minimal_brain"


@pytest.fixture
def fixture_corpus(fixture_brain_path: Path) -> list[Document]:
    """Load the minimal fixture brain."""
    return load_brain(fixture_brain_path)


@pytest.fixture
def fixture_graph(fixture_corpus: list[Document]) -> LinkGraph:
    """Build the link graph of the fixture brain."""
    return build_graph(fixture_corpus)


@pytest.fixture
def neuro_corpus() -> list[Document]:
    """Two concepts, one linking to itself and the other."""
    return [
        Document("concepts/dopamine", "Dopamine", "See [[Dopamine]] and [[serotonin]].", "concepts"),
        Document("concepts/serotonin", "Serotonin", "", "concepts"),
    ]
