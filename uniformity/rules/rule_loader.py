#!/usr/bin/env python3
"""
Rule set loading.

Parses rules.json into RuleSet dataclasses, rejecting any shape the checker
does not understand so that a typo in the rule file cannot silently disable
a check.
"""

from pathlib import Path, PurePosixPath
from typing import Any, Dict, List

from ..models import (
    SECTIONS, FilePatternRule, GlobPatternRule, PatternRules, RuleConfigError,
    RuleSet, SectionRules, StructureRules,
)
from ..utils.file_utils import load_json_file


DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "rules.json"

_SECTION_KEYS = {"structure", "patterns"}
_STRUCTURE_KEYS = {"required_folders", "required_files"}
_PATTERN_KEYS = {"api_service", "contexts"}
_FILE_RULE_KEYS = {"file", "must_include", "cannot_include"}
_GLOB_RULE_KEYS = {"pattern", "must_include"}


def load_rules(rules_path: Path = DEFAULT_RULES_PATH) -> RuleSet:
    """Load and validate a rule file."""
    return parse_rules(load_json_file(Path(rules_path)))


def parse_rules(data: Any) -> RuleSet:
    """Build a RuleSet from already-decoded JSON data."""
    _expect_object(data, "rules")
    _reject_unknown_keys(data, set(SECTIONS), "rules")

    sections = {}
    for section in SECTIONS:
        if section in data:
            sections[section] = _parse_section(data[section], section)
    return RuleSet(sections=sections)


def _parse_section(data: Any, where: str) -> SectionRules:
    _expect_object(data, where)
    _reject_unknown_keys(data, _SECTION_KEYS, where)

    structure = StructureRules()
    if "structure" in data:
        structure_data = data["structure"]
        _expect_object(structure_data, f"{where}.structure")
        _reject_unknown_keys(structure_data, _STRUCTURE_KEYS, f"{where}.structure")
        structure = StructureRules(
            required_folders=_string_list(structure_data, "required_folders", f"{where}.structure"),
            required_files=_string_list(structure_data, "required_files", f"{where}.structure"),
        )

    patterns = PatternRules()
    if "patterns" in data:
        patterns_data = data["patterns"]
        _expect_object(patterns_data, f"{where}.patterns")
        _reject_unknown_keys(patterns_data, _PATTERN_KEYS, f"{where}.patterns")
        if "api_service" in patterns_data:
            patterns.api_service = _parse_file_rule(
                patterns_data["api_service"], f"{where}.patterns.api_service"
            )
        if "contexts" in patterns_data:
            patterns.contexts = _parse_glob_rule(
                patterns_data["contexts"], f"{where}.patterns.contexts"
            )

    return SectionRules(structure=structure, patterns=patterns)


def _parse_file_rule(data: Any, where: str) -> FilePatternRule:
    _expect_object(data, where)
    _reject_unknown_keys(data, _FILE_RULE_KEYS, where)
    return FilePatternRule(
        file=_required_string(data, "file", where),
        must_include=_string_list(data, "must_include", where),
        cannot_include=_string_list(data, "cannot_include", where),
    )


def _parse_glob_rule(data: Any, where: str) -> GlobPatternRule:
    _expect_object(data, where)
    _reject_unknown_keys(data, _GLOB_RULE_KEYS, where)
    pattern = _required_string(data, "pattern", where)
    parts = PurePosixPath(pattern.replace("\\", "/")).parts
    if pattern.startswith(("/", "\\")) or ".." in parts:
        raise RuleConfigError(f"{where}.pattern must stay inside the section directory, got '{pattern}'")
    if not parts:
        raise RuleConfigError(f"{where}.pattern does not name any files, got '{pattern}'")
    return GlobPatternRule(
        pattern=pattern,
        must_include=_string_list(data, "must_include", where),
    )


# ----------------------------------------------------------------------
# Shape helpers
# ----------------------------------------------------------------------

def _expect_object(data: Any, where: str) -> None:
    if not isinstance(data, dict):
        raise RuleConfigError(f"{where} must be an object, got {type(data).__name__}")


def _reject_unknown_keys(data: Dict, allowed: set, where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise RuleConfigError(
            f"Unknown key(s) in {where}: {', '.join(unknown)} "
            f"(expected: {', '.join(sorted(allowed))})"
        )


def _required_string(data: Dict, key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise RuleConfigError(f"{where}.{key} must be a non-empty string")
    return value


def _string_list(data: Dict, key: str, where: str) -> List[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RuleConfigError(f"{where}.{key} must be a list of strings")
    return list(value)
