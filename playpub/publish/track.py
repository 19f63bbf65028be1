from __future__ import annotations

from enum import Enum

__all__ = ["ReleaseTrack"]


class ReleaseTrack(Enum):
    """Distribution channels a bundle can be released to."""

    INTERNAL = "internal"
    ALPHA = "alpha"
    BETA = "beta"
    PRODUCTION = "production"

    def __str__(self) -> str:
        return self.value

    @property
    def config_value(self) -> str:
        return self.value

    @classmethod
    def from_config_value(cls, name: str | None) -> ReleaseTrack | None:
        """Look up a track by name, ignoring case; None when unrecognised."""
        if name is None:
            return None
        wanted = name.strip().lower()
        for track in cls:
            if track.value == wanted:
                return track
        return None
