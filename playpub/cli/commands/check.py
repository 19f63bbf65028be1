from __future__ import annotations

from pathlib import Path

import typer

from playpub.cli.commands._helpers import exit_with_code, resolve_release_config
from playpub.cli.context import build_context
from playpub.core.errors import ErrorCode
from playpub.output.console import Style
from playpub.publish.rollout import format_percentage, parse_rollout_percentage
from playpub.publish.track import ReleaseTrack
from playpub.publish.validate import changelog_warnings, validate


def check(
    config: Path | None = typer.Option(None, "--config", help="Config file (default: playpub.toml)"),
    variables: list[str] | None = typer.Option(
        None, "--var", help="Build variable for expansion, NAME=VALUE (repeatable)"
    ),
) -> None:
    """Validate the publish configuration without touching any files."""
    ctx = build_context(config)
    console = ctx.console

    release = resolve_release_config(
        ctx,
        artifacts=None,
        mapping=None,
        application_id=None,
        track=None,
        rollout=None,
        variables=variables,
    )

    for warning in changelog_warnings(release):
        console.warning(warning)

    errors = validate(release)
    if errors:
        console.error("Invalid configuration:")
        for error in errors:
            console.bullet(error)
        exit_with_code(int(ErrorCode.CONFIG_ERROR))

    track = ReleaseTrack.from_config_value(release.track_name)
    pct = parse_rollout_percentage(release.rollout_percentage)
    console.header("Release configuration")
    console.print(f"artifacts: {release.artifact_pattern}", Style.DIM)
    console.print(f"mapping: {release.mapping_pattern or '(none)'}", Style.DIM)
    console.print(f"changelog: {len(release.changelog)} locale(s)", Style.DIM)
    console.success(f"track '{track}' at {format_percentage(pct)}%")


def tracks() -> None:
    """List the release tracks that can be published to."""
    for track in ReleaseTrack:
        typer.echo(track.config_value)
