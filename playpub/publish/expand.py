"""Variable expansion of step configuration.

Configuration strings may reference build variables as ``$NAME`` or
``${NAME}``. Expansion runs once, producing an immutable ``ReleaseConfig``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

from playpub.publish.model import ChangeNote, RawReleaseConfig, ReleaseConfig

__all__ = ["EnvironmentExpander", "Expander", "expand_config", "fix_empty_and_trim"]

_VARIABLE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_.]*)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


class Expander(Protocol):
    def expand(self, raw: str) -> str: ...


class EnvironmentExpander:
    """Expands variables from a mapping; unknown variables are left as is."""

    def __init__(self, variables: Mapping[str, str]) -> None:
        self._variables = dict(variables)

    def expand(self, raw: str) -> str:
        def _sub(match: re.Match[str]) -> str:
            name = match.group(1) or match.group(2)
            value = self._variables.get(name)
            return match.group(0) if value is None else value

        return _VARIABLE.sub(_sub, raw)


def fix_empty_and_trim(value: str | None) -> str | None:
    if value is None:
        return None
    s = value.strip()
    return s or None


def _expand(expander: Expander, value: str | None) -> str | None:
    value = fix_empty_and_trim(value)
    if value is None:
        return None
    return fix_empty_and_trim(expander.expand(value))


def expand_config(raw: RawReleaseConfig, expander: Expander) -> ReleaseConfig:
    """Expand every configured string in one pass."""
    changelog = tuple(
        ChangeNote(
            language=expander.expand(note.language.strip()),
            text=expander.expand(note.text.strip()),
        )
        for note in raw.changelog
    )
    return ReleaseConfig(
        artifact_pattern=_expand(expander, raw.artifact_pattern),
        application_id=_expand(expander, raw.application_id),
        mapping_pattern=_expand(expander, raw.mapping_pattern),
        track_name=_expand(expander, raw.track_name),
        rollout_percentage=_expand(expander, raw.rollout_percentage),
        changelog=changelog,
    )
