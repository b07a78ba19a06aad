"""Orgenda - agenda view over org-style outline files."""

__version__ = "0.1.0"
