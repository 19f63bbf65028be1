from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "MAX_CHANGE_NOTE_LENGTH",
    "Artifact",
    "BuildResult",
    "ChangeNote",
    "MappingAssociation",
    "MappingFile",
    "RawReleaseConfig",
    "ReleaseConfig",
    "WorkspaceFile",
]

MAX_CHANGE_NOTE_LENGTH = 500


class BuildResult(Enum):
    """Result of the build so far, ordered from best to worst."""

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2
    NOT_BUILT = 3
    ABORTED = 4

    def __str__(self) -> str:
        return self.name.lower()

    def is_worse_than(self, other: BuildResult) -> bool:
        return self.value > other.value

    @classmethod
    def parse(cls, name: str) -> BuildResult | None:
        wanted = name.strip().upper().replace("-", "_")
        for result in cls:
            if result.name == wanted:
                return result
        return None


@dataclass(frozen=True, slots=True)
class WorkspaceFile:
    """A file found in the workspace, by relative and absolute path."""

    relative_path: str
    path: Path

    @classmethod
    def under(cls, root: Path, relative_path: str) -> WorkspaceFile:
        return cls(relative_path=relative_path, path=root / relative_path)

    def __str__(self) -> str:
        return self.relative_path


# An application bundle to upload, and the deobfuscation file that decodes
# its crash reports.
Artifact = WorkspaceFile
MappingFile = WorkspaceFile


@dataclass(frozen=True, slots=True)
class MappingAssociation:
    """Artifact -> mapping file pairs, in artifact order.

    Either empty (no mapping pattern configured) or one pair per artifact.
    """

    pairs: tuple[tuple[Artifact, MappingFile], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.pairs

    def get(self, artifact: Artifact) -> MappingFile | None:
        for candidate, mapping in self.pairs:
            if candidate == artifact:
                return mapping
        return None

    def as_dict(self) -> dict[Artifact, MappingFile]:
        return dict(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True, slots=True)
class ChangeNote:
    """Release notes for one locale."""

    language: str
    text: str


@dataclass(frozen=True, slots=True)
class RawReleaseConfig:
    """Step configuration as persisted, before variable expansion."""

    artifact_pattern: str | None = None
    application_id: str | None = None
    mapping_pattern: str | None = None
    track_name: str | None = None
    rollout_percentage: str | None = None
    changelog: tuple[ChangeNote, ...] = ()


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Expanded configuration for one publish invocation.

    String fields are trimmed; empty values are None.
    """

    artifact_pattern: str | None
    application_id: str | None
    mapping_pattern: str | None
    track_name: str | None
    rollout_percentage: str | None
    changelog: tuple[ChangeNote, ...] = ()
