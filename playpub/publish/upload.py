"""The seam between the publish pipeline and the remote service.

An ``Uploader`` performs the actual network publish. Its contract: either it
returns, or it raises ``UploadFailure`` and the remote account has not been
modified.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from playpub.core.result import Err
from playpub.output.console import ConsoleProtocol, Style
from playpub.platform.process import run as run_process
from playpub.publish.model import Artifact, ChangeNote, MappingAssociation
from playpub.publish.rollout import format_percentage
from playpub.publish.track import ReleaseTrack

if TYPE_CHECKING:
    from playpub.publish.credentials import CredentialsProvider

__all__ = [
    "CommandUploader",
    "DryRunUploader",
    "UploadFailure",
    "UploadRequest",
    "Uploader",
]


class UploadFailure(Exception):
    """The remote publish failed; nothing was applied to the account."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


@dataclass(frozen=True, slots=True)
class UploadRequest:
    application_id: str | None
    workspace_root: Path
    artifacts: tuple[Artifact, ...]
    mappings: MappingAssociation
    track: ReleaseTrack
    rollout_percentage: float
    changelog: tuple[ChangeNote, ...]

    def to_json(self) -> str:
        artifacts: list[dict[str, object]] = []
        for artifact in self.artifacts:
            mapping = self.mappings.get(artifact)
            artifacts.append(
                {
                    "path": str(artifact.path),
                    "relative_path": artifact.relative_path,
                    "mapping": str(mapping.path) if mapping is not None else None,
                }
            )
        payload: dict[str, object] = {
            "application_id": self.application_id,
            "workspace_root": str(self.workspace_root),
            "artifacts": artifacts,
            "track": self.track.config_value,
            "rollout_percentage": self.rollout_percentage,
            "changelog": [{"language": n.language, "text": n.text} for n in self.changelog],
        }
        return json.dumps(payload, indent=2)


class Uploader(Protocol):
    def upload(self, request: UploadRequest) -> bool:
        """Publish the request; raise UploadFailure on failure."""
        ...


class DryRunUploader:
    """Reports what would be uploaded without contacting any service."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def upload(self, request: UploadRequest) -> bool:
        app = request.application_id or "(from bundle)"
        self._console.info(
            f"dry run: would release {len(request.artifacts)} AAB(s) of {app} to "
            f"'{request.track}' at {format_percentage(request.rollout_percentage)}%"
        )
        for artifact in request.artifacts:
            mapping = request.mappings.get(artifact)
            suffix = f" (mapping: {mapping.relative_path})" if mapping is not None else ""
            self._console.bullet(f"{artifact.relative_path}{suffix}", Style.DIM)
        for note in request.changelog:
            self._console.bullet(f"[{note.language}] {note.text}", Style.DIM)
        return True


class CommandUploader:
    """Delegates the publish to an external command.

    The request is written to the command's stdin as JSON and the credentials
    file path is exported as ``PLAYPUB_CREDENTIALS``. Exit status 0 means the
    release was applied; anything else is an ``UploadFailure``.
    """

    def __init__(
        self,
        command: tuple[str, ...],
        *,
        credentials: CredentialsProvider | None,
        console: ConsoleProtocol,
        timeout: float | None = None,
    ) -> None:
        if not command:
            raise ValueError("upload command must not be empty")
        self._command = command
        self._credentials = credentials
        self._console = console
        self._timeout = timeout

    def upload(self, request: UploadRequest) -> bool:
        from playpub.publish.credentials import CREDENTIALS_ENV

        env = dict(os.environ)
        if self._credentials is not None:
            creds = self._credentials.service_account_credentials()
            env[CREDENTIALS_ENV] = str(creds.path)

        result = run_process(
            list(self._command),
            cwd=request.workspace_root,
            env=env,
            input=request.to_json(),
            timeout=self._timeout,
        )
        if isinstance(result, Err):
            raise UploadFailure(result.error.detail)

        for line in result.value.splitlines():
            if line.strip():
                self._console.print(line, Style.DIM)
        return True
