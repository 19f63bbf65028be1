"""Exit codes for the publish step.

The build host only sees the process exit status, so every terminal
publish outcome maps to one of these values. They should remain stable:
- 0: Published, or skipped because the build had already failed
- 1: Configuration error (missing pattern, unknown track, bad rollout)
- 2: Resolution error (no artifacts, no mapping files, pairing mismatch)
- 4: Upload error (remote publish attempted and failed)
- 5: I/O error (config file unreadable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    CONFIG_ERROR = 1
    RESOLUTION_ERROR = 2
    UPLOAD_ERROR = 4
    IO_ERROR = 5
