"""
Provider Registry - Ordered lookup of search providers.

User providers from the config file come first, followed by the
built-in defaults. Nothing is deduplicated: when a user provider shares
a name or alias with a default, the user's one is found first.
"""

from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from loguru import logger

from nsearch.errors import ProviderNotFoundError
from nsearch.search.provider import DEFAULT_PROVIDERS, SearchProvider

if TYPE_CHECKING:
    from nsearch.config import ConfigurationFile


def build_providers(config: Optional["ConfigurationFile"] = None) -> list[SearchProvider]:
    """Concatenate configured providers (if any) with the defaults."""
    providers: list[SearchProvider] = []
    if config is not None:
        providers.extend(config.providers)
    providers.extend(DEFAULT_PROVIDERS)
    return providers


def resolve(providers: Iterable[SearchProvider], selector: str) -> SearchProvider:
    """
    Find the first provider whose name or alias equals the selector.

    Args:
        providers: Providers in lookup order
        selector: Name or alias typed by the user (case-sensitive)

    Returns:
        The first matching provider

    Raises:
        ProviderNotFoundError: if nothing matches
    """
    for provider in providers:
        if provider.matches(selector):
            return provider
    raise ProviderNotFoundError(selector)


class ProviderRegistry:
    """Read-only, ordered collection of providers."""

    def __init__(self, providers: Iterable[SearchProvider]):
        self._providers: tuple[SearchProvider, ...] = tuple(providers)

    @classmethod
    def from_config(cls, config: Optional["ConfigurationFile"] = None) -> "ProviderRegistry":
        registry = cls(build_providers(config))
        logger.debug(f"Registry loaded with {len(registry)} providers")
        return registry

    @property
    def providers(self) -> tuple[SearchProvider, ...]:
        return self._providers

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._providers]

    def resolve(self, selector: str) -> SearchProvider:
        provider = resolve(self._providers, selector)
        logger.debug(f"Resolved '{selector}' to provider {provider.name}")
        return provider

    def __iter__(self) -> Iterator[SearchProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)
