"""Outcome presentation utilities.

The orchestrator already logged the details of a failure; this module only
adds the closing line and maps each outcome to a process exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from playpub.core.errors import ErrorCode
from playpub.publish.outcome import (
    ConfigInvalid,
    NoArtifacts,
    NoMappingFiles,
    PairingMismatch,
    PublishOutcome,
    Skipped,
    Success,
    UploadFailed,
)
from playpub.publish.rollout import format_percentage

if TYPE_CHECKING:
    from playpub.output.console import ConsoleProtocol

__all__ = ["outcome_exit_code", "print_outcome_summary"]


def print_outcome_summary(outcome: PublishOutcome, console: ConsoleProtocol) -> None:
    match outcome:
        case Success(artifacts=artifacts, track=track, rollout_percentage=pct):
            console.success(
                f"Released {len(artifacts)} AAB(s) to '{track}' at {format_percentage(pct)}%"
            )
        case Skipped(build_result=result):
            console.info(f"Nothing uploaded (build result: {result})")
        case ConfigInvalid(errors=errors):
            console.error(f"AAB upload failed: {len(errors)} configuration error(s)")
        case NoArtifacts() | NoMappingFiles() | PairingMismatch():
            console.error("AAB upload failed: no files were uploaded")
        case UploadFailed():
            console.error("AAB upload failed")


def outcome_exit_code(outcome: PublishOutcome) -> int:
    match outcome:
        case Success() | Skipped():
            return int(ErrorCode.OK)
        case ConfigInvalid():
            return int(ErrorCode.CONFIG_ERROR)
        case NoArtifacts() | NoMappingFiles() | PairingMismatch():
            return int(ErrorCode.RESOLUTION_ERROR)
        case UploadFailed():
            return int(ErrorCode.UPLOAD_ERROR)
