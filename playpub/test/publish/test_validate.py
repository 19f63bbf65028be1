"""Tests for playpub.publish.validate module."""

from __future__ import annotations

from dataclasses import replace

import pytest

from playpub.publish.model import ChangeNote, ReleaseConfig
from playpub.publish.validate import changelog_warnings, validate


def _config(**overrides: object) -> ReleaseConfig:
    base = ReleaseConfig(
        artifact_pattern="**/*.aab",
        application_id="com.example.app",
        mapping_pattern=None,
        track_name="production",
        rollout_percentage=None,
    )
    return replace(base, **overrides)  # type: ignore[arg-type]


class TestValidate:
    """Tests for validate()."""

    def test_valid_config(self) -> None:
        """A complete config has no errors."""
        assert validate(_config()) == ()

    def test_missing_pattern(self) -> None:
        """A missing artifact pattern is reported."""
        errors = validate(_config(artifact_pattern=None))
        assert errors == ("Path or pattern to AAB file was not specified",)

    def test_missing_track(self) -> None:
        """A missing track is reported."""
        errors = validate(_config(track_name=None))
        assert errors == ("Release track was not specified",)

    @pytest.mark.parametrize("name", ["Production", "production", "PRODUCTION", "Beta", "internal"])
    def test_track_name_ignores_case(self, name: str) -> None:
        """Track names are matched case-insensitively."""
        assert validate(_config(track_name=name)) == ()

    def test_unknown_track_is_echoed(self) -> None:
        """An unknown track is named in the error."""
        errors = validate(_config(track_name="nightly-test"))
        assert errors == ("'nightly-test' is not a valid release track",)

    def test_bad_track_skips_rollout_check(self) -> None:
        """The rollout is only checked once the track is valid."""
        errors = validate(_config(track_name="nightly-test", rollout_percentage="250"))
        assert len(errors) == 1

    @pytest.mark.parametrize(
        "raw", [None, "100", "100%", "0", "50%", "12.5", "not a number", "1e2", "infinity"]
    )
    def test_valid_rollouts(self, raw: str | None) -> None:
        """In-range and unparseable rollouts are both accepted."""
        assert validate(_config(rollout_percentage=raw)) == ()

    @pytest.mark.parametrize(
        ("raw", "formatted"),
        [("-1", "-1"), ("101", "101"), ("100.5%", "100.5")],
    )
    def test_out_of_range_rollout(self, raw: str, formatted: str) -> None:
        """An out-of-range rollout is reported with its formatted value."""
        errors = validate(_config(rollout_percentage=raw))
        assert errors == (f"{formatted}% is not a valid rollout percentage",)

    def test_errors_accumulate(self) -> None:
        """Every error is reported, not just the first."""
        errors = validate(_config(artifact_pattern=None, track_name=None))
        assert errors == (
            "Path or pattern to AAB file was not specified",
            "Release track was not specified",
        )

    def test_long_change_note(self) -> None:
        """Changelog text over 500 characters is an error."""
        notes = (ChangeNote(language="en-GB", text="x" * 501),)
        errors = validate(_config(changelog=notes))
        assert len(errors) == 1
        assert "'en-GB'" in errors[0]
        assert "500 characters" in errors[0]

    def test_change_note_at_limit(self) -> None:
        """Exactly 500 characters is allowed."""
        notes = (ChangeNote(language="en-GB", text="x" * 500),)
        assert validate(_config(changelog=notes)) == ()

    def test_language_warnings_are_not_errors(self) -> None:
        """A malformed language code does not fail validation."""
        notes = (ChangeNote(language="English", text="e"),)
        assert validate(_config(changelog=notes)) == ()


class TestChangelogWarnings:
    """Tests for changelog_warnings()."""

    def test_language_codes(self) -> None:
        """Only codes that are neither language tags nor variables warn."""
        notes = (
            ChangeNote(language="en-GB", text="a"),
            ChangeNote(language="fil", text="b"),
            ChangeNote(language="es-419", text="c"),
            ChangeNote(language="${LANG}", text="d"),
            ChangeNote(language="English", text="e"),
        )
        warnings = changelog_warnings(_config(changelog=notes))
        assert len(warnings) == 1
        assert "'English'" in warnings[0]
