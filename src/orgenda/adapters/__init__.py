"""Adapters - I/O implementations of ports."""

from .file_outline import FileOutlineSource, InMemoryOutlineSource, read_sources

__all__ = [
    "FileOutlineSource",
    "InMemoryOutlineSource",
    "read_sources",
]
