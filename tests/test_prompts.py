"""
Tests for the interactive provider menu and query prompt.

click.prompt is replaced with a scripted sequence of answers.
"""

import click
import pytest

from nsearch.errors import PromptCancelledError
from nsearch.search.provider import DEFAULT_PROVIDERS
from nsearch.search.registry import ProviderRegistry
from nsearch.utils import prompts


def _script(monkeypatch, *answers):
    """Make click.prompt return the answers in order (exceptions are raised)."""
    queue = list(answers)
    asked = []

    def fake_prompt(text, **kwargs):
        asked.append(text)
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    monkeypatch.setattr(prompts.click, "prompt", fake_prompt)
    return asked


@pytest.fixture
def registry():
    return ProviderRegistry(DEFAULT_PROVIDERS)


class TestSelectProvider:
    """Numbered menu selection."""

    def test_select_by_number(self, monkeypatch, registry):
        _script(monkeypatch, "2")
        assert prompts.select_provider(registry).name == "Wikipedia"

    def test_select_by_alias(self, monkeypatch, registry):
        _script(monkeypatch, "yt")
        assert prompts.select_provider(registry).name == "YouTube"

    def test_menu_lists_every_provider(self, monkeypatch, registry, capsys):
        _script(monkeypatch, "1")
        prompts.select_provider(registry)
        err = capsys.readouterr().err
        assert prompts.PROVIDER_PROMPT in err
        for provider in DEFAULT_PROVIDERS:
            assert provider.name in err

    def test_out_of_range_number_asks_again(self, monkeypatch, registry):
        asked = _script(monkeypatch, "0", "99", "3")
        assert prompts.select_provider(registry).name == "YouTube"
        assert len(asked) == 3

    def test_non_decimal_digit_asks_again(self, monkeypatch, registry):
        asked = _script(monkeypatch, "\u00b2", "ddg")
        assert prompts.select_provider(registry).name == "DuckDuckGo"
        assert len(asked) == 2

    def test_unknown_name_asks_again(self, monkeypatch, registry, capsys):
        _script(monkeypatch, "nonexistent", "ddg")
        assert prompts.select_provider(registry).name == "DuckDuckGo"
        assert "nonexistent" in capsys.readouterr().err

    def test_abort_raises_cancelled(self, monkeypatch, registry):
        _script(monkeypatch, click.Abort())
        with pytest.raises(PromptCancelledError):
            prompts.select_provider(registry)


class TestAskQuery:
    """Free-text query prompt."""

    def test_returns_answer(self, monkeypatch):
        asked = _script(monkeypatch, "rust lang")
        assert prompts.ask_query() == "rust lang"
        assert asked == [prompts.QUERY_PROMPT]

    def test_abort_raises_cancelled(self, monkeypatch):
        _script(monkeypatch, click.Abort())
        with pytest.raises(PromptCancelledError) as exc:
            prompts.ask_query()
        assert exc.value.prompt == prompts.QUERY_PROMPT
