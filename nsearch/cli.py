"""
nsearch command line.

Usage:
  nsearch                       # pick a provider, then type a query
  nsearch ddg                   # search DuckDuckGo, prompt for the query
  nsearch wiki rust language    # open the search directly
  nsearch --list                # show available providers

Flow: load config → pick provider → get query → build URL → open browser.
Any error stops the run with a message on stderr and exit status 1.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from loguru import logger

from nsearch import __version__
from nsearch.config import find_config_path, load_config
from nsearch.errors import NsearchError
from nsearch.logging_config import resolve_log_level, setup_logging
from nsearch.search.registry import ProviderRegistry
from nsearch.services.browser import BrowserLauncher, open_url
from nsearch.utils.prompts import ask_query, select_provider

CONFIG_PATH_ENV = "SEARCH_CONFIG_PATH"


def load_registry(config_path: Optional[Path] = None) -> ProviderRegistry:
    """Build the registry from the config file (if any) plus defaults."""
    path = find_config_path(config_path)
    config = load_config(path) if path is not None else None
    return ProviderRegistry.from_config(config)


def run(
    provider: Optional[str] = None,
    query: Optional[str] = None,
    config_path: Optional[Path] = None,
    launcher: Optional[BrowserLauncher] = None,
) -> str:
    """
    Run one search: resolve provider and query, then open the URL.

    Missing provider or query are asked for interactively.

    Returns:
        The URL that was opened
    """
    registry = load_registry(config_path)

    selected = registry.resolve(provider) if provider is not None else select_provider(registry)
    if query is None:
        query = ask_query()

    url = selected.get_url(query)
    click.echo(f"Opening {url}")
    open_url(url, launcher)
    return url


def print_providers(registry: ProviderRegistry) -> None:
    for provider in registry:
        aliases = f" ({', '.join(provider.aliases)})" if provider.aliases else ""
        click.echo(f"{provider.name}{aliases}: {provider.search_url}")


@click.command()
@click.option(
    "-c", "--config-path",
    envvar=CONFIG_PATH_ENV,
    type=click.Path(path_type=Path),
    help=f"TOML file with extra providers (env: {CONFIG_PATH_ENV}).",
)
@click.option("--list", "list_providers", is_flag=True, help="List providers and exit.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="nsearch")
@click.argument("provider", required=False)
@click.argument("query", nargs=-1)
def cli(config_path, list_providers, verbose, provider, query):
    """Open a web search for QUERY on PROVIDER (a name or alias)."""
    setup_logging(resolve_log_level(verbose))

    try:
        if list_providers:
            print_providers(load_registry(config_path))
            return
        run(
            provider=provider,
            query=" ".join(query) if query else None,
            config_path=config_path,
        )
    except NsearchError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    load_dotenv()
    cli()
