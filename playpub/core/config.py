"""Typed loading of the publish step configuration.

The step is configured by a TOML file (``playpub.toml`` in the workspace
root by default):

    [publish]
    artifacts = "app/build/outputs/bundle/**/*.aab"
    application_id = "com.example.app"
    mapping = "app/build/outputs/mapping/**/mapping.txt"
    track = "production"
    rollout = "10%"

    [[publish.changelog]]
    language = "en-GB"
    text = "Bug fixes"

    [upload]
    command = ["bundle-upload", "--json"]
    timeout = 600

    [credentials]
    path = "service-account.json"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from .result import Err, Ok, Result
from .structured import (
    StrDict,
    as_str_dict,
    get_float,
    get_str,
    get_str_list,
    get_table,
    get_table_list,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ChangelogEntry",
    "ConfigError",
    "CredentialsSettings",
    "PublishSettings",
    "ReleaseSettings",
    "UploadSettings",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "playpub.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None
    kind: Literal["io", "invalid"] = "invalid"


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    language: str
    text: str


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    """The [publish] table, as written in the file.

    Values may still contain build variables; they are expanded per run.
    """

    artifacts: str | None = None
    application_id: str | None = None
    mapping: str | None = None
    track: str | None = None
    rollout: str | None = None
    changelog: tuple[ChangelogEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class UploadSettings:
    """External command performing the remote publish.

    No command means no real upload is possible; the CLI then requires
    ``--dry-run``.
    """

    command: tuple[str, ...] = ()
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class CredentialsSettings:
    path: str | None = None


@dataclass(frozen=True, slots=True)
class PublishSettings:
    """Main configuration container."""

    release: ReleaseSettings = field(default_factory=ReleaseSettings)
    upload: UploadSettings = field(default_factory=UploadSettings)
    credentials: CredentialsSettings = field(default_factory=CredentialsSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> PublishSettings:
        """Create settings from a parsed TOML mapping."""
        publish: StrDict = get_table(data, "publish") or {}
        upload: StrDict = get_table(data, "upload") or {}
        credentials: StrDict = get_table(data, "credentials") or {}

        changelog: list[ChangelogEntry] = []
        for entry in get_table_list(publish, "changelog"):
            language = get_str(entry, "language")
            if language is None:
                raise ValueError("changelog entries need a 'language'")
            changelog.append(ChangelogEntry(language=language, text=get_str(entry, "text") or ""))

        return cls(
            release=ReleaseSettings(
                artifacts=get_str(publish, "artifacts"),
                application_id=get_str(publish, "application_id"),
                mapping=get_str(publish, "mapping"),
                track=get_str(publish, "track"),
                rollout=get_str(publish, "rollout"),
                changelog=tuple(changelog),
            ),
            upload=UploadSettings(
                command=get_str_list(upload, "command") or (),
                timeout=get_float(upload, "timeout"),
            ),
            credentials=CredentialsSettings(path=get_str(credentials, "path")),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(
            ConfigError(
                f"Config file not found: {path}",
                path=path,
                hint=f"Create {CONFIG_FILE_NAME} or pass --config",
                kind="io",
            )
        )
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path, kind="io"))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path, kind="io"))


def load_config(path: Path) -> Result[PublishSettings, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(PublishSettings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        settings = PublishSettings.from_dict(result.value)
        return Ok(settings)
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[PublishSettings, ConfigError]:
    """Like load_config, but a missing file yields default (empty) settings.

    Everything can then come from command-line options.
    """
    if not path.exists():
        return Ok(PublishSettings())
    return load_config(path)
