"""
Search package - Providers, URL templating and provider lookup.
"""

from .provider import DEFAULT_PROVIDERS, QUERY_PLACEHOLDER, SearchProvider, build_url
from .registry import ProviderRegistry, build_providers, resolve

__all__ = [
    "DEFAULT_PROVIDERS",
    "QUERY_PLACEHOLDER",
    "SearchProvider",
    "build_url",
    "ProviderRegistry",
    "build_providers",
    "resolve",
]
