#!/usr/bin/env python3
"""
Main uniformity checker orchestration.

Runs the structure and pattern checks for each section in a fixed order and
collects everything into one CheckResults object.
"""

import time
from pathlib import Path
from typing import Optional, Union

from .models import SECTIONS, CheckResults, RuleSet
from .rules import DEFAULT_RULES_PATH, PatternRuleChecker, StructureRuleChecker, load_rules
from .utils import PathHelper


class UniformityChecker:
    """Checks one project against one rule set."""

    def __init__(self, project_path: str = ".", rules: Optional[RuleSet] = None, rules_path: Union[str, Path] = DEFAULT_RULES_PATH):
        self.path_helper = PathHelper(project_path)
        self.rules_path = Path(rules_path)
        # A bad rule file raises RuleConfigError here, before any check runs
        self.rules = rules if rules is not None else load_rules(self.rules_path)

        self.structure_checker = StructureRuleChecker(self.path_helper)
        self.pattern_checker = PatternRuleChecker(self.path_helper)

    def run_all_checks(self) -> CheckResults:
        """Run all checks and return a fresh CheckResults."""
        start_time = time.time()
        results = CheckResults(
            project_path=str(self.path_helper.project_path),
            rules_path=str(self.rules_path),
        )

        for section in SECTIONS:
            section_rules = self.rules.get(section)
            self.structure_checker.check_section(section, section_rules, results)
            self.pattern_checker.check_section(section, section_rules, results)

        results.execution_time = time.time() - start_time
        return results
