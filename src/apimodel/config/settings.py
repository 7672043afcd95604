"""ApiModelSettings: one object for CLI flags, env vars, and ``apimodel.toml``.

Later sources fill only what earlier ones leave unset:
  1. CLI flags (init kwargs, ``None`` dropped)
  2. ``APIMODEL_*`` env vars, ``__`` between section and key
  3. the discovered or ``--config`` TOML file
  4. defaults from :mod:`apimodel.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from apimodel.config.discovery import find_config, read_toml
from apimodel.config.models import DocumentConfig, HrefConfig
from apimodel.domain.errors import DocumentError
from apimodel.domain.validation import format_errors


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``apimodel.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = read_toml(toml_path)
            except DocumentError as exc:
                raise click.ClickException(exc.message) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class ApiModelSettings(BaseSettings):
    """Settings for the apimodel CLI.

    Attributes:
        project_root: Directory relative paths resolve against (parent of
            ``apimodel.toml``, or CWD if no config was found).
        config_path: The config file in effect, if any.
        document_file: Explicit ``--document`` override.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "APIMODEL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    document_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    href: HrefConfig = Field(default_factory=HrefConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ApiModelSettings:
        """Build settings for one CLI invocation.

        The project root defaults to the directory holding the config file,
        or the CWD when there is none. ``None`` flags are dropped so an
        unset CLI flag never masks an env or TOML value.

        Raises:
            click.ClickException: If *config_path* names a missing file, the
                config file is not valid TOML, or a value from any source
                fails validation.
        """
        toml_path = _config_file(config_path, project_root)
        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        overrides = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **overrides)
        except pydantic.ValidationError as exc:
            msg = "Invalid settings: " + "; ".join(format_errors(exc))
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

    def resolve_document(self) -> Path:
        """Return the declarative document to load.

        ``--document`` wins; otherwise ``[document] path`` is taken
        relative to :attr:`project_root`.
        """
        if self.document_file is not None:
            return self.document_file
        path = Path(self.document.path)
        return path if path.is_absolute() else self.project_root / path


def _config_file(config_path: str | None, project_root: Path | None) -> Path | None:
    if not config_path:
        return find_config(project_root)
    path = Path(config_path).expanduser()
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path
