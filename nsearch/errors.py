"""Custom exceptions for nsearch."""

from pathlib import Path


class NsearchError(Exception):
    """Base exception for all nsearch errors."""

    pass


# ─── Configuration Errors ────────────────────────────────────────


class ConfigError(NsearchError):
    """Base exception for configuration file errors."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message} ({path})")


class ConfigReadError(ConfigError):
    """Raised when the configuration file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"Failed to read config file: {reason}")


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"Failed to parse config file: {reason}")


# ─── Provider Errors ─────────────────────────────────────────────


class ProviderNotFoundError(NsearchError):
    """Raised when no provider has the requested name or alias."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"No provider found with name or alias '{selector}'")


class InvalidTemplateError(NsearchError):
    """Raised when a search URL does not contain exactly one placeholder."""

    def __init__(self, provider: str, placeholder: str, count: int) -> None:
        self.provider = provider
        self.count = count
        super().__init__(
            f"[{provider}] Query URL must contain exactly one instance of "
            f"'{placeholder}' (found {count})"
        )


# ─── Interaction Errors ──────────────────────────────────────────


class PromptCancelledError(NsearchError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Prompt cancelled: {prompt}")


class OpenURLError(NsearchError):
    """Raised when the browser could not be launched."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to open URL {url}: {reason}")
