"""Tests for AskSettings: flags, env vars, and TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from askctl.config.settings import AskSettings
from askctl.domain.types import AnswerType


class TestAskSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = AskSettings.from_cli()
        assert settings.answer_type is None
        assert settings.question == ""
        assert settings.title == "askctl"
        assert settings.verbose is None
        assert settings.quiet is False
        assert settings.revalidate is True
        assert settings.notify is True
        assert settings.colour is True
        assert settings.accepted_inputs is None
        assert settings.config_path is None

    def test_frozen(self) -> None:
        settings = AskSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_none_flags_fall_through(self) -> None:
        settings = AskSettings.from_cli(notify=None, title=None)
        assert settings.notify is True
        assert settings.title == "askctl"


class TestEffectiveType:
    def test_default_yes_no(self) -> None:
        assert AskSettings.from_cli().effective_type() == "yes_no"

    def test_pattern_means_regex(self) -> None:
        assert AskSettings.from_cli(accepted_inputs="^a$").effective_type() == "regex"

    def test_explicit_type_wins(self) -> None:
        settings = AskSettings.from_cli(answer_type="integer", accepted_inputs="^1$")
        assert settings.effective_type() == "integer"


class TestEchoAnswer:
    def test_yes_no_silent_by_default(self) -> None:
        assert AskSettings.from_cli().echo_answer(AnswerType.YES_NO) is False

    def test_other_types_echo_by_default(self) -> None:
        assert AskSettings.from_cli().echo_answer(AnswerType.LIST) is True

    def test_verbose_forces_echo(self) -> None:
        assert AskSettings.from_cli(verbose=True).echo_answer(AnswerType.YES_NO) is True

    def test_quiet_suppresses_echo(self) -> None:
        assert AskSettings.from_cli(quiet=True).echo_answer(AnswerType.INTEGER) is False

    def test_verbose_beats_quiet(self) -> None:
        settings = AskSettings.from_cli(quiet=True, verbose=True)
        assert settings.echo_answer(AnswerType.INTEGER) is True


class TestEnvVars:
    def test_native_booleans(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASKCTL_NOTIFY", "false")
        monkeypatch.setenv("ASKCTL_REVALIDATE", "0")
        monkeypatch.setenv("ASKCTL_TITLE", "Deploy")
        settings = AskSettings.from_cli()
        assert settings.notify is False
        assert settings.revalidate is False
        assert settings.title == "Deploy"

    def test_flags_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASKCTL_TITLE", "Deploy")
        assert AskSettings.from_cli(title="Backup").title == "Backup"

    def test_invalid_boolean(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASKCTL_NOTIFY", "maybe")
        with pytest.raises(click.ClickException, match="Invalid settings: notify"):
            AskSettings.from_cli()


class TestTomlSource:
    def test_discovered_from_xdg(self, tmp_path: Path) -> None:
        config = tmp_path / "xdg" / "askctl" / "askctl.toml"
        config.parent.mkdir(parents=True)
        config.write_text('title = "From TOML"\nnotify = false\n')
        settings = AskSettings.from_cli()
        assert settings.title == "From TOML"
        assert settings.notify is False
        assert settings.config_path == config

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("colour = false\n")
        settings = AskSettings.from_cli(config_path=str(custom))
        assert settings.colour is False
        assert settings.config_path == custom

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('title = "toml"\n')
        monkeypatch.setenv("ASKCTL_TITLE", "env")
        assert AskSettings.from_cli(config_path=str(custom)).title == "env"

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('title = "ok"\n[unrelated]\nkey = 1\n')
        assert AskSettings.from_cli(config_path=str(custom)).title == "ok"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        custom = tmp_path / "broken.toml"
        custom.write_text("title = \n")
        with pytest.raises(click.ClickException):
            AskSettings.from_cli(config_path=str(custom))
