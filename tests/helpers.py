"""
Helpers for building throwaway projects and running the checker against them.
"""

import json
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator

from uniformity.checker import UniformityChecker
from uniformity.models import CheckResults
from uniformity.rules import parse_rules


@contextmanager
def create_test_project(files: Dict[str, str], folders: Iterable[str] = ()) -> Iterator[Path]:
    """Materialise files (path -> content) and empty folders in a temporary project root."""
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for folder in folders:
            (root / folder).mkdir(parents=True, exist_ok=True)
        for relative_path, content in files.items():
            file_path = root / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        yield root


def write_rules(directory: Path, rules: Dict) -> Path:
    """Write a rule dict to <directory>/rules.json and return its path."""
    rules_path = directory / "rules.json"
    rules_path.write_text(json.dumps(rules), encoding="utf-8")
    return rules_path


def run_checker(project_path: Path, rules: Dict) -> CheckResults:
    """Run all checks for project_path against an in-memory rule dict."""
    checker = UniformityChecker(str(project_path), rules=parse_rules(rules))
    return checker.run_all_checks()
