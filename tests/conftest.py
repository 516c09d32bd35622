from __future__ import annotations

import io
from collections.abc import Callable, Iterable

import pytest
from loguru import logger
from rich.console import Console

from genchat.render import Renderer


class ScriptedRenderer(Renderer):
    """Renderer fed from a fixed list of lines, recording everything printed."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.prompts: list[str] = []
        self._lines = iter(lines)
        super().__init__(
            console=Console(file=self.out, width=200, color_system=None, highlight=False),
            error_console=Console(file=self.err, width=200, color_system=None, highlight=False),
            reader=self._read,
        )

    def _read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    @property
    def output(self) -> str:
        return self.out.getvalue()


@pytest.fixture
def make_renderer() -> Callable[[Iterable[str]], ScriptedRenderer]:
    return ScriptedRenderer


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterable[None]:
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("GOOGLE_API_KEY", "GENCHAT_API_KEY", "GENCHAT_API_BASE", "GENCHAT_SYSTEM_PROMPT", "GENCHAT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
