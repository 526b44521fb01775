#!/usr/bin/env python3
"""
Structure rules.

Checks that every required folder and file of a section exists.
"""

from typing import List, Optional

from ..models import CheckKind, CheckResult, CheckResults, SectionRules
from ..utils.path_utils import PathHelper


class StructureRuleChecker:
    """Checker for required folders and files."""

    def __init__(self, path_helper: PathHelper):
        self.path_helper = path_helper

    def check_section(self, section: str, section_rules: Optional[SectionRules], results: CheckResults) -> List[CheckResult]:
        """Check folders then files of one section, in declared order."""
        if section_rules is None:
            return []

        base_path = self.path_helper.section_path(section)
        checked = []

        for kind, paths in (
            (CheckKind.FOLDER, section_rules.structure.required_folders),
            (CheckKind.FILE, section_rules.structure.required_files),
        ):
            for relative_path in paths:
                exists = (base_path / relative_path).exists()
                item = CheckResult(kind=kind, path=relative_path, exists=exists, section=section)
                results.structure.append(item)
                results.tally.record(exists)
                checked.append(item)

        return checked
