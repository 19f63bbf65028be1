"""Artifact discovery, pairing, validation and upload orchestration.

- resolve: Ant-style pattern matching against the workspace
- pairing: artifact -> mapping file association
- validate: configuration checks
- orchestrator: the publish pipeline and its outcomes
"""

from __future__ import annotations
