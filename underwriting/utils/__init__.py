"""Utility functions."""

from .text import count_tokens, truncate_text

__all__ = [
    "truncate_text",
    "count_tokens",
]
