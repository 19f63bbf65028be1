"""Publish pipeline: validate, resolve, pair, upload.

Every failure is logged with its full context and returned as a tagged
outcome. Nothing is uploaded unless every earlier stage succeeded.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from playpub.core.result import Err
from playpub.output.console import ConsoleProtocol
from playpub.publish.model import BuildResult, MappingFile, ReleaseConfig
from playpub.publish.outcome import (
    ConfigInvalid,
    NoArtifacts,
    NoMappingFiles,
    PairingMismatch,
    PublishAborted,
    PublishOutcome,
    Skipped,
    Success,
    UploadFailed,
    is_success,
)
from playpub.publish.pairing import pair
from playpub.publish.resolve import FileLister, PatternResolver, list_matching
from playpub.publish.rollout import parse_rollout_percentage
from playpub.publish.track import ReleaseTrack
from playpub.publish.upload import UploadFailure, Uploader, UploadRequest
from playpub.publish.validate import changelog_warnings, validate

__all__ = ["PublishOrchestrator"]


class PublishOrchestrator:
    def __init__(
        self,
        *,
        workspace_root: Path,
        uploader: Uploader,
        console: ConsoleProtocol,
        lister: FileLister = list_matching,
    ) -> None:
        self._workspace_root = workspace_root
        self._uploader = uploader
        self._console = console
        self._resolver = PatternResolver(workspace_root, lister)

    def perform(self, config: ReleaseConfig, build_result: BuildResult | None) -> PublishOutcome:
        """Run ``publish`` and raise PublishAborted unless it succeeded."""
        outcome = self.publish(config, build_result)
        if not is_success(outcome):
            raise PublishAborted(outcome)
        return outcome

    def publish(self, config: ReleaseConfig, build_result: BuildResult | None) -> PublishOutcome:
        console = self._console

        if build_result is not None and build_result.is_worse_than(BuildResult.UNSTABLE):
            console.info("Skipping upload to Google Play due to build result")
            return Skipped(build_result=str(build_result))

        errors = validate(config)
        if errors:
            console.error("Cannot upload to Google Play:")
            for error in errors:
                console.bullet(error)
            return ConfigInvalid(errors=errors)

        for warning in changelog_warnings(config):
            console.warning(warning)

        # Both guaranteed by validate()
        assert config.artifact_pattern is not None
        track = ReleaseTrack.from_config_value(config.track_name)
        assert track is not None

        artifacts = self._resolver.resolve_files(config.artifact_pattern)
        if not artifacts:
            console.error(
                f"No AAB files matching the pattern '{config.artifact_pattern}' could be found"
            )
            return NoArtifacts(pattern=config.artifact_pattern)

        mapping_candidates: tuple[MappingFile, ...] = ()
        if config.mapping_pattern is not None:
            mapping_candidates = self._resolver.resolve_files(config.mapping_pattern)
            if not mapping_candidates:
                console.error(
                    "No obfuscation mapping files matching the pattern "
                    f"'{config.mapping_pattern}' could be found; no files will be uploaded"
                )
                return NoMappingFiles(pattern=config.mapping_pattern)

        paired = pair(artifacts, mapping_candidates)
        if isinstance(paired, Err):
            mismatch: PairingMismatch = replace(
                paired.error, mapping_pattern=config.mapping_pattern
            )
            console.error(f"{mismatch.message}:")
            for path in (*mismatch.artifacts, *mismatch.mapping_files):
                console.bullet(path)
            return mismatch

        rollout = parse_rollout_percentage(config.rollout_percentage)
        request = UploadRequest(
            application_id=config.application_id,
            workspace_root=self._workspace_root,
            artifacts=artifacts,
            mappings=paired.value,
            track=track,
            rollout_percentage=rollout,
            changelog=config.changelog,
        )

        try:
            uploaded = self._uploader.upload(request)
        except UploadFailure as e:
            return self._upload_failed(e.cause)
        if not uploaded:
            return self._upload_failed("the uploader reported a failure")

        return Success(artifacts=artifacts, track=track, rollout_percentage=rollout)

    def _upload_failed(self, cause: str) -> UploadFailed:
        self._console.error(f"Upload failed: {cause}")
        self._console.bullet("No changes have been applied to the Google Play account")
        return UploadFailed(cause=cause)
