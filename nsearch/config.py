"""
Configuration file loading.

The config file is TOML with a list of provider tables:

    [[providers]]
    name = "GitHub"
    search_url = "https://github.com/search?q={}"
    aliases = ["gh"]

Configured providers are looked up before the built-in ones.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import toml
from loguru import logger

from nsearch.errors import ConfigParseError, ConfigReadError
from nsearch.search.provider import SearchProvider

# Used when neither --config-path nor SEARCH_CONFIG_PATH is given
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "nsearch.toml"


@dataclass(frozen=True)
class ConfigurationFile:
    """Parsed contents of a config file."""
    providers: tuple[SearchProvider, ...]


def load_config(config_path: Union[str, Path]) -> ConfigurationFile:
    """
    Read and parse a TOML config file.

    Args:
        config_path: Path to the config file

    Returns:
        ConfigurationFile with the providers in file order

    Raises:
        ConfigReadError: the file can't be read
        ConfigParseError: the file isn't TOML or doesn't match the schema
    """
    path = Path(config_path).expanduser()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e

    try:
        data = toml.loads(text)
    except Exception as e:
        raise ConfigParseError(path, str(e)) from e

    if "providers" not in data:
        raise ConfigParseError(path, "missing 'providers' list")

    entries = data["providers"]
    if not isinstance(entries, list):
        raise ConfigParseError(path, "'providers' must be a list of tables")

    try:
        providers = tuple(SearchProvider.from_dict(entry) for entry in entries)
    except ValueError as e:
        raise ConfigParseError(path, str(e)) from e

    logger.debug(f"Loaded {len(providers)} providers from {path}")
    return ConfigurationFile(providers=providers)


def find_config_path(config_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Decide which config file to load, if any.

    An explicit path is always returned (even if missing, so that
    load_config reports it). Otherwise the default location is used
    only when a file exists there.
    """
    if config_path:
        return Path(config_path)
    if DEFAULT_CONFIG_PATH.is_file():
        logger.debug(f"Using default config at {DEFAULT_CONFIG_PATH}")
        return DEFAULT_CONFIG_PATH
    return None
