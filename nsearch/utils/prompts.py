"""
Interactive prompts shown when the provider or query is missing.

Prompts are written to stderr so that stdout only carries the final
"Opening <url>" line.
"""

import click
from loguru import logger

from nsearch.errors import PromptCancelledError, ProviderNotFoundError
from nsearch.search.provider import SearchProvider
from nsearch.search.registry import ProviderRegistry

PROVIDER_PROMPT = "What platform are we searching?"
QUERY_PROMPT = "What is the search query?"


def _prompt(text: str, **kwargs) -> str:
    try:
        return click.prompt(text, err=True, **kwargs)
    except click.Abort as e:
        raise PromptCancelledError(text) from e


def select_provider(registry: ProviderRegistry) -> SearchProvider:
    """
    Show a numbered menu of providers and return the chosen one.

    The answer can be a menu number or a provider name/alias. Invalid
    answers re-ask; Ctrl-C or end of input cancels.
    """
    providers = registry.providers
    click.echo(PROVIDER_PROMPT, err=True)
    for index, provider in enumerate(providers, start=1):
        click.echo(f"  {index:>2}) {provider}", err=True)

    while True:
        answer = _prompt("Select", prompt_suffix=" > ").strip()

        if answer.isdecimal():
            choice = int(answer)
            if 1 <= choice <= len(providers):
                return providers[choice - 1]
            click.echo(f"Pick a number between 1 and {len(providers)}", err=True)
            continue

        try:
            return registry.resolve(answer)
        except ProviderNotFoundError as e:
            logger.debug(f"Menu answer rejected: {e}")
            click.echo(str(e), err=True)


def ask_query() -> str:
    """Ask for the search text. An empty answer is allowed."""
    return _prompt(QUERY_PROMPT, default="", show_default=False)
