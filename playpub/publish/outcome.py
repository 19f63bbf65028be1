"""Terminal states of a publish invocation.

Each state is its own type so callers can ``match`` on the cause instead of
reading log output.
"""

from __future__ import annotations

from dataclasses import dataclass

from playpub.publish.model import Artifact
from playpub.publish.track import ReleaseTrack

__all__ = [
    "ConfigInvalid",
    "NoArtifacts",
    "NoMappingFiles",
    "PairingMismatch",
    "PublishAborted",
    "PublishOutcome",
    "Skipped",
    "Success",
    "UploadFailed",
    "is_success",
]


@dataclass(frozen=True, slots=True)
class Skipped:
    """The build had already failed; nothing was uploaded."""

    build_result: str


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    errors: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoArtifacts:
    pattern: str


@dataclass(frozen=True, slots=True)
class NoMappingFiles:
    pattern: str


@dataclass(frozen=True, slots=True)
class PairingMismatch:
    """Artifact and mapping file counts cannot be paired unambiguously."""

    artifacts: tuple[str, ...]
    mapping_files: tuple[str, ...]
    mapping_pattern: str | None = None

    @property
    def artifact_count(self) -> int:
        return len(self.artifacts)

    @property
    def mapping_count(self) -> int:
        return len(self.mapping_files)

    @property
    def message(self) -> str:
        pattern = f" matching the pattern '{self.mapping_pattern}'" if self.mapping_pattern else ""
        return (
            f"There are {self.artifact_count} AABs to be uploaded, but "
            f"{self.mapping_count} obfuscation mapping files were found{pattern}"
        )


@dataclass(frozen=True, slots=True)
class UploadFailed:
    cause: str


@dataclass(frozen=True, slots=True)
class Success:
    artifacts: tuple[Artifact, ...]
    track: ReleaseTrack
    rollout_percentage: float


type PublishOutcome = (
    Skipped
    | ConfigInvalid
    | NoArtifacts
    | NoMappingFiles
    | PairingMismatch
    | UploadFailed
    | Success
)


def is_success(outcome: PublishOutcome) -> bool:
    """Skipping counts as success so publishing never worsens a failed build."""
    return isinstance(outcome, Skipped | Success)


class PublishAborted(Exception):
    """Raised to the build host when a publish invocation fails."""

    def __init__(self, outcome: PublishOutcome) -> None:
        super().__init__(f"AAB upload failed: {type(outcome).__name__}")
        self.outcome = outcome

    @property
    def upload_attempted(self) -> bool:
        return isinstance(self.outcome, UploadFailed)
