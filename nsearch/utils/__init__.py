# nsearch Utilities Package
"""
Terminal interaction helpers for nsearch.
"""

from .prompts import ask_query, select_provider

__all__ = ["ask_query", "select_provider"]
