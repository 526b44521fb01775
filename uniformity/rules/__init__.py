"""Rule loading and checking modules for uniformity checking."""

from .rule_loader import DEFAULT_RULES_PATH, load_rules, parse_rules
from .structure_rules import StructureRuleChecker
from .pattern_rules import PatternRuleChecker

__all__ = [
    "DEFAULT_RULES_PATH",
    "load_rules",
    "parse_rules",
    "StructureRuleChecker",
    "PatternRuleChecker",
]
