"""
Shared test fixtures for the nsearch test suite.

Config files are real TOML files written to tmp_path (no mocking of the
filesystem).
"""

import pytest
import toml
from loguru import logger


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Keep the user's own config and env vars out of the tests."""
    monkeypatch.setattr("nsearch.config.DEFAULT_CONFIG_PATH", tmp_path / "no-default.toml")
    monkeypatch.delenv("SEARCH_CONFIG_PATH", raising=False)
    monkeypatch.delenv("NSEARCH_LOG_LEVEL", raising=False)
    yield
    logger.remove()


@pytest.fixture
def tmp_config(tmp_path):
    """Config with a new provider and an override of a built-in one."""
    config_path = tmp_path / "nsearch.toml"
    data = {
        "providers": [
            {
                "name": "GitHub",
                "search_url": "https://github.com/search?q={}",
                "aliases": ["gh"],
            },
            {
                "name": "DuckDuckGo",
                "search_url": "https://html.duckduckgo.com/html/?q={}",
            },
        ]
    }
    config_path.write_text(toml.dumps(data))
    return config_path


@pytest.fixture
def fake_launcher():
    """Launcher that records URLs instead of opening a browser."""
    from nsearch.services.browser import BrowserLauncher

    class RecordingLauncher(BrowserLauncher):
        def __init__(self):
            self.opened = []

        def launch(self, url):
            self.opened.append(url)

    return RecordingLauncher()
