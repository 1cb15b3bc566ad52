"""Main CLI module for evtflags.

This module re-exports the CLI for convenience. The main implementation
is in __main__.py.
"""

from evtflags.__main__ import cli

__all__ = ["cli"]
