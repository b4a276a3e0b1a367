"""
Search Provider - A named search destination with a URL template.

A provider's search URL holds exactly one "{}" placeholder, which is
replaced by the percent-encoded query:

  DuckDuckGo (ddg)   → https://duckduckgo.com/?q={}
  Wikipedia  (wiki)  → https://en.wikipedia.org/w/index.php?search={}

Built-in providers live in DEFAULT_PROVIDERS; user providers come from
the TOML config file (see config.py).
"""

import urllib.parse
from dataclasses import dataclass, field, replace
from typing import Any

from loguru import logger

from nsearch.errors import InvalidTemplateError

QUERY_PLACEHOLDER = "{}"


@dataclass(frozen=True)
class SearchProvider:
    """A search destination selectable by name or alias."""
    name: str
    search_url: str
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return self.name

    def with_aliases(self, *aliases: str) -> "SearchProvider":
        """Return a copy with extra aliases appended."""
        return replace(self, aliases=self.aliases + tuple(aliases))

    def matches(self, selector: str) -> bool:
        """Exact, case-sensitive match against the name or any alias."""
        return selector == self.name or selector in self.aliases

    def validate(self) -> None:
        """
        Check the search URL holds exactly one placeholder.

        Raises:
            InvalidTemplateError: zero or several placeholders found
        """
        count = self.search_url.count(QUERY_PLACEHOLDER)
        if count != 1:
            raise InvalidTemplateError(self.name, QUERY_PLACEHOLDER, count)

    def get_url(self, query: str) -> str:
        """
        Build the search URL for a raw query.

        The template is validated before anything is substituted. Spaces
        become %20 and reserved characters are escaped; the result is
        returned as-is, without checking it is a well-formed URL.

        Args:
            query: Free text typed by the user

        Returns:
            The provider's search URL with the encoded query inserted
        """
        self.validate()
        encoded = urllib.parse.quote(query, safe="")
        url = self.search_url.replace(QUERY_PLACEHOLDER, encoded)
        logger.debug(f"Built URL for {self.name}: {url}")
        return url

    @classmethod
    def from_dict(cls, data: Any) -> "SearchProvider":
        """
        Build a provider from one [[providers]] table of the config file.

        Raises:
            ValueError: if the table doesn't have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"provider entry must be a table, got {type(data).__name__}")

        for key in ("name", "search_url"):
            if key not in data:
                raise ValueError(f"provider entry is missing '{key}'")
            if not isinstance(data[key], str):
                raise ValueError(f"provider '{key}' must be a string")

        aliases = data.get("aliases", [])
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise ValueError(f"aliases of provider '{data['name']}' must be a list of strings")

        return cls(name=data["name"], search_url=data["search_url"], aliases=tuple(aliases))


def build_url(provider: SearchProvider, query: str) -> str:
    """Module-level shortcut for provider.get_url(query)."""
    return provider.get_url(query)


DEFAULT_PROVIDERS: tuple[SearchProvider, ...] = (
    SearchProvider("DuckDuckGo", "https://duckduckgo.com/?q={}").with_aliases("ddg"),
    SearchProvider("Wikipedia", "https://en.wikipedia.org/w/index.php?search={}").with_aliases("wiki"),
    SearchProvider("YouTube", "https://www.youtube.com/results?search_query={}").with_aliases("yt"),
    SearchProvider("Cargo", "https://crates.io/search?q={}"),
    SearchProvider("Nixpkgs", "https://search.nixos.org/packages?query={}"),
    SearchProvider("Nix Wiki", "https://nixos.wiki/index.php?search={}").with_aliases("nix"),
    SearchProvider("Nix Options", "https://search.nixos.org/options?query={}"),
)
