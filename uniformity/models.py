#!/usr/bin/env python3
"""
Data models for uniformity checking.

Contains the rule set structures loaded from rules.json and the result
structures produced by a single checking run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


SECTIONS = ("frontend", "backend")

# Mosaic/percentage thresholds
EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70


class UniformityError(Exception):
    """Base class for uniformity checker errors."""


class RuleConfigError(UniformityError):
    """The rule file is missing, unreadable, or has an unexpected shape."""


class FileReadError(UniformityError):
    """A project file exists but its text content cannot be read."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CheckKind(Enum):
    """Kinds of structure checks."""
    FOLDER = "folder"
    FILE = "file"


class Band(Enum):
    """Qualitative classification of the uniformity percentage."""
    EXCELLENT = "excellent"
    GOOD = "good, improvements needed"
    NEEDS_WORK = "needs work"
    NO_CHECKS = "no checks configured"


# ----------------------------------------------------------------------
# Rule set
# ----------------------------------------------------------------------

@dataclass
class FilePatternRule:
    """Substring rules for one designated file."""
    file: str
    must_include: List[str] = field(default_factory=list)
    cannot_include: List[str] = field(default_factory=list)


@dataclass
class GlobPatternRule:
    """Substring rules applied to every file matched by a glob pattern."""
    pattern: str
    must_include: List[str] = field(default_factory=list)


@dataclass
class StructureRules:
    required_folders: List[str] = field(default_factory=list)
    required_files: List[str] = field(default_factory=list)


@dataclass
class PatternRules:
    api_service: Optional[FilePatternRule] = None
    contexts: Optional[GlobPatternRule] = None


@dataclass
class SectionRules:
    """Rules for one project section (frontend or backend)."""
    structure: StructureRules = field(default_factory=StructureRules)
    patterns: PatternRules = field(default_factory=PatternRules)


@dataclass
class RuleSet:
    """Rules keyed by section name. Sections missing from the file are absent."""
    sections: Dict[str, SectionRules] = field(default_factory=dict)

    def get(self, section: str) -> Optional[SectionRules]:
        return self.sections.get(section)


# ----------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------

@dataclass
class CheckResult:
    """Outcome of a single folder/file existence check."""
    kind: CheckKind
    path: str
    exists: bool
    section: str

    def to_dict(self) -> Dict:
        return {
            "type": self.kind.value,
            "path": self.path,
            "exists": self.exists,
            "section": self.section,
        }


@dataclass
class PatternCheck:
    """One substring (or file availability) check inside a PatternResult."""
    description: str
    passed: bool


@dataclass
class PatternResult:
    """All pattern checks performed against one file."""
    file: str
    label: str
    section: str = ""
    issues: List[str] = field(default_factory=list)
    checks: List[PatternCheck] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "file": self.file,
            "label": self.label,
            "section": self.section,
            "issues": list(self.issues),
        }


@dataclass
class CheckWarning:
    """A non-fatal condition that contributed no checks, e.g. an empty glob."""
    section: str
    message: str

    def to_dict(self) -> Dict:
        return {"section": self.section, "message": self.message}


@dataclass
class Tally:
    """Running count of checks. Only grows, via record()."""
    outcomes: List[bool] = field(default_factory=list)

    @property
    def total_checks(self) -> int:
        return len(self.outcomes)

    @property
    def passed_checks(self) -> int:
        return sum(1 for passed in self.outcomes if passed)

    @property
    def failed_checks(self) -> int:
        return self.total_checks - self.passed_checks

    def record(self, passed: bool) -> bool:
        """Record one check outcome and return it."""
        self.outcomes.append(bool(passed))
        return passed


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, halves rounding up."""
    return (2 * numerator + denominator) // (2 * denominator)


@dataclass
class CheckResults:
    """Everything produced by one checking run."""
    project_path: str = "."
    rules_path: str = ""
    structure: List[CheckResult] = field(default_factory=list)
    patterns: List[PatternResult] = field(default_factory=list)
    warnings: List[CheckWarning] = field(default_factory=list)
    tally: Tally = field(default_factory=Tally)
    execution_time: float = 0.0

    def percentage(self) -> int:
        """Uniformity percentage. Zero when no checks were configured, never 100 with a failure."""
        total = self.tally.total_checks
        if total == 0:
            return 0
        percentage = round_half_up(self.tally.passed_checks * 100, total)
        if self.tally.failed_checks > 0:
            return min(percentage, 99)
        return percentage

    def band(self) -> Band:
        if self.tally.total_checks == 0:
            return Band.NO_CHECKS
        percentage = self.percentage()
        if percentage >= EXCELLENT_THRESHOLD:
            return Band.EXCELLENT
        elif percentage >= GOOD_THRESHOLD:
            return Band.GOOD
        return Band.NEEDS_WORK

    def is_perfect(self) -> bool:
        return self.tally.total_checks > 0 and self.tally.failed_checks == 0

    def missing_structure(self) -> List[CheckResult]:
        return [item for item in self.structure if not item.exists]

    def patterns_with_issues(self) -> List[PatternResult]:
        return [result for result in self.patterns if result.issues]

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        return {
            "timestamp": None,  # Will be set by reporter
            "project_path": self.project_path,
            "rules_path": self.rules_path,
            "execution_time": self.execution_time,
            "summary": {
                "total_checks": self.tally.total_checks,
                "passed_checks": self.tally.passed_checks,
                "failed_checks": self.tally.failed_checks,
                "percentage": self.percentage(),
                "band": self.band().value,
            },
            "structure": [item.to_dict() for item in self.structure],
            "patterns": [result.to_dict() for result in self.patterns],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
