from __future__ import annotations

from collections.abc import Sequence

from playpub.core.result import Err, Ok, Result
from playpub.publish.model import Artifact, MappingAssociation, MappingFile
from playpub.publish.outcome import PairingMismatch

__all__ = ["pair"]


def pair(
    artifacts: Sequence[Artifact],
    mapping_candidates: Sequence[MappingFile],
) -> Result[MappingAssociation, PairingMismatch]:
    """Associate each artifact with at most one mapping file.

    - no candidates: empty association
    - one candidate: shared by every artifact
    - as many candidates as artifacts: paired by position
    - anything else is ambiguous and refused
    """
    if not mapping_candidates:
        return Ok(MappingAssociation())

    if len(mapping_candidates) == 1:
        only = mapping_candidates[0]
        return Ok(MappingAssociation(tuple((a, only) for a in artifacts)))

    # One mapping file per flavor/dimension. Artifacts and mapping files live
    # in different directory trees (outputs/bundle/<flavor>/ vs
    # outputs/mapping/<flavor>/), so both sorted resolutions are assumed to
    # list flavors in the same order.
    if len(mapping_candidates) == len(artifacts):
        return Ok(MappingAssociation(tuple(zip(artifacts, mapping_candidates, strict=True))))

    return Err(
        PairingMismatch(
            artifacts=tuple(a.relative_path for a in artifacts),
            mapping_files=tuple(m.relative_path for m in mapping_candidates),
        )
    )
