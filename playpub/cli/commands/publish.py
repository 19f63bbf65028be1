from __future__ import annotations

from pathlib import Path

import typer

from playpub.cli.commands._helpers import exit_with_code, resolve_release_config
from playpub.cli.context import build_context
from playpub.core.errors import ErrorCode
from playpub.output.console import Style
from playpub.output.errors import outcome_exit_code, print_outcome_summary
from playpub.publish.credentials import FileCredentials
from playpub.publish.model import BuildResult
from playpub.publish.orchestrator import PublishOrchestrator
from playpub.publish.outcome import PublishAborted
from playpub.publish.upload import CommandUploader, DryRunUploader, Uploader


def publish(
    config: Path | None = typer.Option(None, "--config", help="Config file (default: playpub.toml)"),
    artifacts: str | None = typer.Option(None, "--artifacts", help="AAB file pattern"),
    mapping: str | None = typer.Option(None, "--mapping", help="Mapping file pattern"),
    application_id: str | None = typer.Option(None, "--application-id", help="Application ID"),
    track: str | None = typer.Option(None, "--track", help="Release track"),
    rollout: str | None = typer.Option(None, "--rollout", help="Rollout percentage, e.g. 10%"),
    build_result: str | None = typer.Option(
        None,
        "--build-result",
        envvar="PLAYPUB_BUILD_RESULT",
        help="Result of the build so far (success|unstable|failure|not_built|aborted)",
    ),
    variables: list[str] | None = typer.Option(
        None, "--var", help="Build variable for expansion, NAME=VALUE (repeatable)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve and validate, do not upload"),
) -> None:
    """Upload AAB files to Google Play and roll them out on a track."""
    ctx = build_context(config)
    console = ctx.console

    result: BuildResult | None = None
    if build_result:
        result = BuildResult.parse(build_result)
        if result is None:
            console.error(f"unknown build result: {build_result}")
            exit_with_code(int(ErrorCode.CONFIG_ERROR))

    release = resolve_release_config(
        ctx,
        artifacts=artifacts,
        mapping=mapping,
        application_id=application_id,
        track=track,
        rollout=rollout,
        variables=variables,
    )

    # A failed build is skipped before anything is uploaded.
    skipping = result is not None and result.is_worse_than(BuildResult.UNSTABLE)

    uploader: Uploader
    if dry_run or skipping:
        uploader = DryRunUploader(console)
    elif ctx.settings.upload.command:
        uploader = CommandUploader(
            ctx.settings.upload.command,
            credentials=FileCredentials(
                workspace_root=ctx.workspace_root,
                path=ctx.settings.credentials.path,
            ),
            console=console,
            timeout=ctx.settings.upload.timeout,
        )
    else:
        console.error("no upload command configured")
        console.print("hint: set [upload] command in playpub.toml, or pass --dry-run", Style.DIM)
        exit_with_code(int(ErrorCode.CONFIG_ERROR))

    orchestrator = PublishOrchestrator(
        workspace_root=ctx.workspace_root,
        uploader=uploader,
        console=console,
    )
    try:
        outcome = orchestrator.perform(release, result)
    except PublishAborted as e:
        print_outcome_summary(e.outcome, console)
        exit_with_code(outcome_exit_code(e.outcome))

    print_outcome_summary(outcome, console)
