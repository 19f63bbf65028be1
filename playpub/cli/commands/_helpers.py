"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NoReturn

import typer

from playpub.core.errors import ErrorCode
from playpub.output.console import Style
from playpub.publish.expand import EnvironmentExpander, expand_config
from playpub.publish.model import ChangeNote, RawReleaseConfig, ReleaseConfig

if TYPE_CHECKING:
    from playpub.cli.context import CLIContext


def parse_variables(items: list[str] | None, ctx: CLIContext) -> dict[str, str]:
    """Parse ``--var NAME=VALUE`` options."""
    out: dict[str, str] = {}
    for item in items or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            ctx.console.error(f"invalid --var '{item}'")
            ctx.console.print("hint: use --var NAME=VALUE", Style.DIM)
            exit_with_code(int(ErrorCode.CONFIG_ERROR))
        out[name.strip()] = value
    return out


def resolve_release_config(
    ctx: CLIContext,
    *,
    artifacts: str | None,
    mapping: str | None,
    application_id: str | None,
    track: str | None,
    rollout: str | None,
    variables: list[str] | None,
) -> ReleaseConfig:
    """Merge command-line overrides into the file config and expand it."""
    release = ctx.settings.release
    raw = RawReleaseConfig(
        artifact_pattern=release.artifacts if artifacts is None else artifacts,
        application_id=release.application_id if application_id is None else application_id,
        mapping_pattern=release.mapping if mapping is None else mapping,
        track_name=release.track if track is None else track,
        rollout_percentage=release.rollout if rollout is None else rollout,
        changelog=tuple(ChangeNote(language=e.language, text=e.text) for e in release.changelog),
    )

    env = dict(os.environ)
    env.update(parse_variables(variables, ctx))
    return expand_config(raw, EnvironmentExpander(env))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
