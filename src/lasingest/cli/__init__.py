"""
Command-line interface for las-ingest.

Provides commands for parsing, validating and ingesting LAS files.
"""

from .main import app, main

__all__ = ["main", "app"]
