"""Shared pytest fixtures and test helpers for askctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator, Iterable
from io import StringIO
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from askctl.config.settings import AskSettings
from askctl.output.console import create_console
from askctl.services import notify


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep the user's environment, config file, notifier, and log handlers out of tests."""
    for key in list(os.environ):
        if key.startswith("ASKCTL_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr(notify, "NOTIFIERS", [])
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def console() -> Console:
    """A colourless console writing to an in-memory buffer."""
    return create_console(colour=False, file=StringIO())


def make_settings(**kwargs: object) -> AskSettings:
    """Build settings with notifications off unless a test asks for them."""
    kwargs.setdefault("notify", False)
    return AskSettings.from_cli(**kwargs)


def scripted_reader(lines: Iterable[str]) -> Callable[[], str]:
    """Reader returning *lines* one per call, then empty strings (EOF)."""
    it = iter(lines)

    def read() -> str:
        return next(it, "")

    return read
