"""Tests for release tracks and build results."""

from __future__ import annotations

import pytest

from playpub.publish.model import BuildResult
from playpub.publish.track import ReleaseTrack


class TestReleaseTrack:
    """Tests for ReleaseTrack."""

    @pytest.mark.parametrize("name", ["production", "Production", " PRODUCTION "])
    def test_from_config_value_ignores_case(self, name: str) -> None:
        """Config values are matched case-insensitively."""
        assert ReleaseTrack.from_config_value(name) is ReleaseTrack.PRODUCTION

    @pytest.mark.parametrize("name", [None, "", "nightly-test", "prod"])
    def test_unknown_tracks(self, name: str | None) -> None:
        """Unknown or missing names give None."""
        assert ReleaseTrack.from_config_value(name) is None

    def test_config_value_round_trip(self) -> None:
        """Every track parses back from its config value."""
        for track in ReleaseTrack:
            assert ReleaseTrack.from_config_value(track.config_value) is track


class TestBuildResult:
    """Tests for BuildResult."""

    def test_ordering(self) -> None:
        """Only failure, not built and aborted are worse than unstable."""
        assert BuildResult.FAILURE.is_worse_than(BuildResult.UNSTABLE)
        assert BuildResult.ABORTED.is_worse_than(BuildResult.UNSTABLE)
        assert BuildResult.NOT_BUILT.is_worse_than(BuildResult.UNSTABLE)
        assert not BuildResult.UNSTABLE.is_worse_than(BuildResult.UNSTABLE)
        assert not BuildResult.SUCCESS.is_worse_than(BuildResult.UNSTABLE)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("failure", BuildResult.FAILURE),
            ("UNSTABLE", BuildResult.UNSTABLE),
            ("not-built", BuildResult.NOT_BUILT),
            ("bogus", None),
        ],
    )
    def test_parse(self, text: str, expected: BuildResult | None) -> None:
        """Parsing ignores case and accepts dashes."""
        assert BuildResult.parse(text) is expected
