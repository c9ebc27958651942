"""Utility modules."""

from .text import clean, compact, fold_diacritics, tokenize

__all__ = ["clean", "compact", "fold_diacritics", "tokenize"]
