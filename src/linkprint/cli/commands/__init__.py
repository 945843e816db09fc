"""CLI commands."""

from .check import check, want_digest
from .inspect import inspect

__all__ = ["check", "inspect", "want_digest"]
