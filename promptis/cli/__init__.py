"""Command-line entry point for promptis."""

from .main import main

__all__ = ["main"]
