"""Ports - interfaces/protocols for external dependencies."""

from .outline_source import OutlineSource

__all__ = [
    "OutlineSource",
]
