"""brainlink - wiki-link resolution and graph building for a personal brain."""

__version__ = "0.1.0"
