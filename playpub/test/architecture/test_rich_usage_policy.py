"""Only the console module talks to rich."""

from __future__ import annotations

from ._utils import iter_source_files, matches_prefix, package_root, parse_imports

ALLOWLIST = {"output/console.py"}


class TestRichUsagePolicy:
    """Tests for where rich may be imported."""

    def test_direct_rich_imports_are_limited_to_console(self) -> None:
        """rich is only imported by output/console.py."""
        root = package_root()
        offenders: list[str] = []
        for file_path in iter_source_files():
            rel = file_path.relative_to(root).as_posix()
            if rel in ALLOWLIST:
                continue
            for item in parse_imports(file_path):
                if matches_prefix(item.module, "rich"):
                    offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

        assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
