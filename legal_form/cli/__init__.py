"""CLI entry points for legal form normalization."""

from .normalize_names import main as normalize_names_main

__all__ = ["normalize_names_main"]
