"""Project uniformity checking package."""

from .models import (
    Band, CheckKind, CheckResult, CheckResults, CheckWarning, FilePatternRule,
    FileReadError, GlobPatternRule, PatternCheck, PatternResult, PatternRules,
    RuleConfigError, RuleSet, SectionRules, StructureRules, Tally, UniformityError,
)

__all__ = [
    "Band",
    "CheckKind",
    "CheckResult",
    "CheckResults",
    "CheckWarning",
    "FilePatternRule",
    "FileReadError",
    "GlobPatternRule",
    "PatternCheck",
    "PatternResult",
    "PatternRules",
    "RuleConfigError",
    "RuleSet",
    "SectionRules",
    "StructureRules",
    "Tally",
    "UniformityError",
]
