"""Service-account credentials handed to the uploader.

The publish pipeline never reads credential contents; it only locates them
and passes them on.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from playpub.publish.upload import UploadFailure

__all__ = ["CREDENTIALS_ENV", "Credentials", "CredentialsProvider", "FileCredentials"]

CREDENTIALS_ENV = "PLAYPUB_CREDENTIALS"


@dataclass(frozen=True, slots=True)
class Credentials:
    path: Path

    def __repr__(self) -> str:
        return f"Credentials(path={str(self.path)!r})"


class CredentialsProvider(Protocol):
    def service_account_credentials(self) -> Credentials: ...


class FileCredentials:
    """Locates a service-account key file.

    An explicit path wins over the ``PLAYPUB_CREDENTIALS`` variable; relative
    paths are taken from the workspace root.
    """

    def __init__(self, *, workspace_root: Path, path: str | None = None) -> None:
        self._workspace_root = workspace_root
        self._path = path

    def service_account_credentials(self) -> Credentials:
        raw = self._path or os.environ.get(CREDENTIALS_ENV)
        if not raw:
            raise UploadFailure(
                f"no service account credentials configured (set credentials.path "
                f"or {CREDENTIALS_ENV})"
            )
        path = Path(raw).expanduser()
        if not path.is_absolute():
            path = self._workspace_root / path
        if not path.is_file():
            raise UploadFailure(f"service account credentials not found: {path}")
        return Credentials(path=path)
