"""Workspace file matching with Ant-style patterns.

Supported syntax:
- several patterns separated by commas
- ``**`` matches zero or more directories
- ``*`` and ``?`` match within a single path segment
- a trailing ``/`` means everything below that directory

Results are sorted so two resolutions over the same tree line up; positional
mapping-file pairing relies on that.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from playpub.publish.model import WorkspaceFile

__all__ = ["DEFAULT_EXCLUDES", "FileLister", "PatternResolver", "ant_to_regex", "list_matching"]

FileLister = Callable[[Path, str], tuple[str, ...]]

DEFAULT_EXCLUDES: tuple[str, ...] = (
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/.DS_Store",
    "**/.git/**",
    "**/.gitattributes",
    "**/.gitignore",
    "**/.gitmodules",
    "**/.hg/**",
    "**/.hgignore",
    "**/.svn/**",
    "**/CVS/**",
)

# Directories excluded as a whole; the walk does not descend into them.
_EXCLUDED_DIRS = frozenset({".git", ".hg", ".svn", "CVS"})


def _translate_segment(segment: str) -> str:
    out: list[str] = []
    for ch in segment:
        if ch == "*":
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(ch))
    return "".join(out)


@lru_cache(maxsize=128)
def ant_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile one Ant pattern into a regex over POSIX relative paths."""
    normalized = pattern.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    if normalized.endswith("/"):
        normalized += "**"

    segments = [s for s in normalized.split("/") if s]
    parts: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        if segment == "**":
            parts.append(".*" if last else "(?:[^/]+/)*")
        else:
            parts.append(_translate_segment(segment) + ("" if last else "/"))
    return re.compile("".join(parts) + r"\Z")


def _split_patterns(pattern: str) -> list[str]:
    return [p.strip() for p in pattern.split(",") if p.strip()]


def _is_excluded(rel: str) -> bool:
    return any(ant_to_regex(p).match(rel) for p in DEFAULT_EXCLUDES)


def list_matching(root: Path, pattern: str) -> tuple[str, ...]:
    """List files under root matching the pattern, as sorted relative paths."""
    if not root.is_dir():
        return ()

    regexes = [ant_to_regex(p) for p in _split_patterns(pattern)]
    if not regexes:
        return ()

    matches: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in _EXCLUDED_DIRS]
        base = Path(dirpath)
        for name in filenames:
            path = base / name
            if not path.is_file():
                continue
            rel = path.relative_to(root).as_posix()
            if _is_excluded(rel):
                continue
            if any(r.match(rel) for r in regexes):
                matches.append(rel)
    return tuple(sorted(matches))


class PatternResolver:
    """Resolves configured patterns against one workspace root."""

    def __init__(self, root: Path, lister: FileLister = list_matching) -> None:
        self._root = root
        self._lister = lister

    def resolve(self, pattern: str) -> tuple[str, ...]:
        return tuple(self._lister(self._root, pattern))

    def resolve_files(self, pattern: str) -> tuple[WorkspaceFile, ...]:
        return tuple(WorkspaceFile.under(self._root, rel) for rel in self.resolve(pattern))
