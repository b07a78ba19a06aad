"""Outline source interface."""

from typing import Protocol


class OutlineSource(Protocol):
    """Interface for enumerating and reading outline files."""

    def list_sources(self) -> list[str]:
        """List source ids in a deterministic order."""
        ...

    def read(self, source_id: str) -> str:
        """Read the raw text of a source. Raises OSError if unreadable."""
        ...
