#!/usr/bin/env python3
"""
Code pattern rules.

Literal, case-sensitive substring checks against raw file content:
- api_service: one file must contain some substrings and must not contain others
- contexts: every file matched by a glob pattern must contain some substrings
"""

from pathlib import Path
from typing import List, Optional

from ..models import (
    CheckResults, CheckWarning, FilePatternRule, FileReadError, GlobPatternRule,
    PatternCheck, PatternResult, SectionRules,
)
from ..utils.file_utils import get_file_content
from ..utils.path_utils import PathHelper, relative_posix


API_SERVICE_LABEL = "API Service"
CONTEXT_LABEL = "Context"


class PatternRuleChecker:
    """Checker for required and forbidden code patterns."""

    def __init__(self, path_helper: PathHelper):
        self.path_helper = path_helper

    def check_section(self, section: str, section_rules: Optional[SectionRules], results: CheckResults) -> None:
        """Run every pattern rule declared for a section."""
        if section_rules is None:
            return

        base_path = self.path_helper.section_path(section)
        patterns = section_rules.patterns

        if patterns.api_service:
            self.check_file_patterns(base_path, patterns.api_service, API_SERVICE_LABEL, section, results)

        if patterns.contexts:
            self.check_glob_patterns(base_path, patterns.contexts, section, results)

    # ------------------------------------------------------------------
    # Single file
    # ------------------------------------------------------------------

    def check_file_patterns(
        self,
        base_path: Path,
        rule: FilePatternRule,
        label: str,
        section: str,
        results: CheckResults,
    ) -> PatternResult:
        """Check must_include and cannot_include substrings of one file."""
        result = PatternResult(file=rule.file, label=label, section=section)
        results.patterns.append(result)

        file_path = base_path / rule.file
        if not file_path.exists():
            self._record_failure(result, "File not found", results)
            return result

        content = self._read(file_path, result, results)
        if content is None:
            return result

        self._check_must_include(content, rule.must_include, result, results)

        for pattern in rule.cannot_include:
            if results.tally.record(pattern not in content):
                result.checks.append(PatternCheck(f"Doesn't use \"{pattern}\"", True))
            else:
                result.issues.append(f"Found forbidden: {pattern}")
                result.checks.append(PatternCheck(f"Found forbidden \"{pattern}\"", False))

        return result

    # ------------------------------------------------------------------
    # Glob set
    # ------------------------------------------------------------------

    def check_glob_patterns(
        self,
        base_path: Path,
        rule: GlobPatternRule,
        section: str,
        results: CheckResults,
    ) -> List[PatternResult]:
        """Check must_include substrings of every file matched by the rule's pattern."""
        matched_files = self.path_helper.find_matching_files(base_path, rule.pattern)

        if not matched_files:
            results.warnings.append(CheckWarning(section, f"No files found matching '{rule.pattern}'"))
            return []

        checked = []
        for file_path in matched_files:
            result = PatternResult(
                file=relative_posix(file_path, base_path),
                label=CONTEXT_LABEL,
                section=section,
            )
            results.patterns.append(result)
            checked.append(result)

            content = self._read(file_path, result, results)
            if content is not None:
                self._check_must_include(content, rule.must_include, result, results)

        return checked

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _check_must_include(
        self, content: str, patterns: List[str], result: PatternResult, results: CheckResults
    ) -> None:
        for pattern in patterns:
            if results.tally.record(pattern in content):
                result.checks.append(PatternCheck(f"Has \"{pattern}\"", True))
            else:
                result.issues.append(f"Missing: {pattern}")
                result.checks.append(PatternCheck(f"Missing \"{pattern}\"", False))

    def _read(self, file_path: Path, result: PatternResult, results: CheckResults) -> Optional[str]:
        """Read file content, recording one failed check if it cannot be read."""
        try:
            return get_file_content(file_path)
        except FileReadError as e:
            self._record_failure(result, f"Unreadable: {e.reason}", results)
            return None

    def _record_failure(self, result: PatternResult, issue: str, results: CheckResults) -> None:
        results.tally.record(False)
        result.issues.append(issue)
        result.checks.append(PatternCheck(issue, False))
