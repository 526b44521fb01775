#!/usr/bin/env python3
"""
Path utility functions for uniformity checking.

Handles section base directories and glob pattern expansion.
"""

import fnmatch
from pathlib import Path, PurePath, PurePosixPath
from typing import List

from ..models import SECTIONS


class PathHelper:
    """Helper class for path-related operations."""

    def __init__(self, project_path: str = "."):
        self.project_path = Path(project_path)

    def section_path(self, section: str) -> Path:
        """Base directory for a section, e.g. <project>/frontend."""
        if section not in SECTIONS:
            raise ValueError(f"Unknown section '{section}' (expected one of {', '.join(SECTIONS)})")
        return self.project_path / section

    def find_matching_files(self, base_path: Path, pattern: str) -> List[Path]:
        """Find files under base_path matching pattern, searching subdirectories recursively."""
        if not base_path.is_dir():
            return []
        recursive_pattern = make_recursive(pattern)
        matches = {
            p for p in base_path.glob(recursive_pattern)
            if p.is_file() and not is_hidden_match(p.relative_to(base_path), recursive_pattern)
        }
        return sorted(matches)


def make_recursive(pattern: str) -> str:
    """
    Make a glob pattern descend into subdirectories.

    A `**` segment is inserted before the first segment containing a
    wildcard, so `src/contexts/*.js` becomes `src/contexts/**/*.js`.
    Patterns that already contain `**` are returned unchanged.
    """
    parts = list(PurePosixPath(pattern.replace("\\", "/")).parts)
    if "**" in parts:
        return "/".join(parts)

    for i, part in enumerate(parts):
        if any(c in part for c in "*?["):
            return "/".join(parts[:i] + ["**"] + parts[i:])

    return "/".join(parts)


def relative_posix(path: Path, base_path: Path) -> str:
    """Path relative to base_path, with forward slashes."""
    return path.relative_to(base_path).as_posix()


def is_hidden_match(relative_path: PurePath, pattern: str) -> bool:
    """
    True if a match passes through a dot-file or dot-directory the pattern does not name.

    Wildcards never match a leading dot on their own; a pattern segment that
    itself starts with `.` (e.g. `.config` or `.*.js`) opts back in.
    """
    dot_segments = [part for part in PurePosixPath(pattern).parts if part.startswith(".")]
    for part in relative_path.parts:
        if part.startswith(".") and not any(fnmatch.fnmatchcase(part, seg) for seg in dot_segments):
            return True
    return False
