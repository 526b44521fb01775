#!/usr/bin/env python3
"""
Main entry point for uniformity checking.

Usage:
    uniformity-check [project_path]
    python3 -m uniformity.main [project_path] --format json
"""

import sys
import argparse
from pathlib import Path

from .checker import UniformityChecker
from .models import RuleConfigError
from .reporter import UniformityReporter
from .rules import DEFAULT_RULES_PATH, load_rules


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Check that a frontend/backend project follows the structure and code pattern rules"
    )
    parser.add_argument(
        'project_path', nargs='?', default=None,
        help='Project root containing frontend/ and backend/ (default: current directory)',
    )
    parser.add_argument(
        '--rules', default=str(DEFAULT_RULES_PATH),
        help='Rule file to check against (default: rules.json shipped with the tool)',
    )
    parser.add_argument('--format', choices=['console', 'json'], default='console', help='Output format')
    parser.add_argument('--output', '-o', default=None, help='Also write a detailed JSON report to this file')
    parser.add_argument('--no-color', action='store_true', help='Disable coloured mosaic output')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Run all checks and exit 0 only on a 100% score."""
    args = parse_args(argv)
    project_path = args.project_path or str(Path.cwd())
    rules_path = Path(args.rules)

    try:
        rules = load_rules(rules_path)
    except RuleConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    checker = UniformityChecker(project_path, rules=rules, rules_path=rules_path)
    results = checker.run_all_checks()

    reporter = UniformityReporter(args.output, no_color=args.no_color)
    success = reporter.report_results(results, format_type=args.format)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
