"""Command-line interface for crawlclient."""

from .main import cli, main

__all__ = ["cli", "main"]
