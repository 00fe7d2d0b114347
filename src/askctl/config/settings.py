"""Unified settings: CLI flags, env vars, and TOML config merged into one object.

Priority chain (highest to lowest):
  1. Init kwargs: flags the user actually passed on the command line
  2. Env vars: ``ASKCTL_*`` prefix, native booleans (``ASKCTL_NOTIFY=false``)
  3. TOML file: ``askctl.toml`` from :mod:`askctl.config.discovery`
  4. Code defaults

The object is frozen once built.  The attempt counter is not
part of it; it lives on the validator.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from askctl.config.discovery import find_config, load_config_data
from askctl.domain.types import DEFAULT_TYPE, AnswerType


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``askctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = load_config_data(toml_path)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the TOML keys that name settings fields."""
        return {k: v for k, v in self._data.items() if k in self.settings_cls.model_fields}


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class AskSettings(BaseSettings):
    """Settings for one askctl invocation.

    Attributes:
        answer_type: Explicit ``--type`` value, or None.
        question: Prompt text (positional words joined by spaces).
        title: Desktop notification title.
        verbose: ``--verbose`` forces echoing the answer; None means
            "use the type's default".
        quiet: ``--quiet`` suppresses echoing unless verbose is set.
        revalidate: Re-prompt after an invalid answer instead of failing.
        notify: Fire a desktop notification before prompting.
        colour: Style the prompt and error messages.
        accepted_inputs: Pattern overriding the type's rule.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ASKCTL_",
    }

    answer_type: str | None = None
    question: str = ""
    title: str = "askctl"
    verbose: bool | None = None
    quiet: bool = False
    revalidate: bool = True
    notify: bool = True
    colour: bool = True
    accepted_inputs: str | None = None
    debug: bool = False
    log_json: bool = False
    config_path: Path | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        **cli_flags: Any,
    ) -> AskSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* or discovers ``askctl.toml``.
        Flags passed as None are dropped so lower-priority sources apply.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
        else:
            toml_path = find_config()

        overrides = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise click.ClickException(f"Invalid settings: {problems}") from exc
        finally:
            _tls.toml_path = None

    def effective_type(self) -> str:
        """The type name to resolve: explicit, else regex with a pattern, else yes_no."""
        if self.answer_type:
            return self.answer_type
        if self.accepted_inputs:
            return AnswerType.REGEX.value
        return DEFAULT_TYPE.value

    def echo_answer(self, answer_type: AnswerType) -> bool:
        """Whether the accepted answer is written to stdout.

        ``--verbose`` wins, then ``--quiet``.  By default every type echoes
        except yes/no, which answers through the exit status.
        """
        if self.verbose:
            return True
        if self.quiet:
            return False
        if self.verbose is False:
            return False
        return answer_type is not AnswerType.YES_NO
