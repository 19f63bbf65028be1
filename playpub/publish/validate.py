"""Configuration checks run before anything is resolved or uploaded."""

from __future__ import annotations

import re

from playpub.publish.model import MAX_CHANGE_NOTE_LENGTH, ReleaseConfig
from playpub.publish.rollout import format_percentage, is_valid_percentage, parse_rollout_percentage
from playpub.publish.track import ReleaseTrack

__all__ = ["LANGUAGE_PATTERN", "VARIABLE_PATTERN", "changelog_warnings", "validate"]

# "de", "fil", "en-GB", "es-419"
LANGUAGE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-(?:[A-Z]{2}|[0-9]{3}))?$")
# A value still waiting for expansion, e.g. "${LANG}"
VARIABLE_PATTERN = re.compile(r"^\$(?:\{[A-Za-z_][A-Za-z0-9_.]*\}|[A-Za-z_][A-Za-z0-9_]*)$")


def validate(config: ReleaseConfig) -> tuple[str, ...]:
    """Return every configuration error; empty means the config is usable.

    The rollout percentage is only checked once the track is known to be
    valid, since a percentage means nothing without a target track.
    """
    errors: list[str] = []

    if config.artifact_pattern is None:
        errors.append("Path or pattern to AAB file was not specified")

    track_name = config.track_name.lower() if config.track_name else None
    if track_name is None:
        errors.append("Release track was not specified")
    elif ReleaseTrack.from_config_value(track_name) is None:
        errors.append(f"'{track_name}' is not a valid release track")
    else:
        pct = parse_rollout_percentage(config.rollout_percentage)
        if not is_valid_percentage(pct):
            errors.append(f"{format_percentage(pct)}% is not a valid rollout percentage")

    for note in config.changelog:
        if len(note.text) > MAX_CHANGE_NOTE_LENGTH:
            errors.append(
                f"Recent changes text for '{note.language}' must be "
                f"{MAX_CHANGE_NOTE_LENGTH} characters or fewer"
            )

    return tuple(errors)


def changelog_warnings(config: ReleaseConfig) -> tuple[str, ...]:
    warnings: list[str] = []
    for note in config.changelog:
        language = note.language
        if LANGUAGE_PATTERN.match(language) or VARIABLE_PATTERN.match(language):
            continue
        warnings.append(f"'{language}': should be a language code like 'be' or 'en-GB'")
    return tuple(warnings)
