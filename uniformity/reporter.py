#!/usr/bin/env python3
"""
Uniformity check reporting module.

Turns a finished CheckResults into console output (per-check lines, the
mosaic, the score band and the issue list) or a JSON report.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.text import Text

from .models import SECTIONS, Band, CheckResults
from .rules.pattern_rules import CONTEXT_LABEL


MOSAIC_WIDTH = 20
PASSED_CELL = "█"
FAILED_CELL = "░"

_BAND_MESSAGES: Dict[Band, str] = {
    Band.EXCELLENT: "🎉 EXCELLENT! Project is highly uniform.",
    Band.GOOD: "⚠️  GOOD. Some improvements needed.",
    Band.NEEDS_WORK: "🚨 NEEDS WORK. Many uniformity issues.",
    Band.NO_CHECKS: "⚠️  NO CHECKS CONFIGURED. The rule set did not produce any checks.",
}

_BAND_STYLES: Dict[Band, str] = {
    Band.EXCELLENT: "bold green",
    Band.GOOD: "bold yellow",
    Band.NEEDS_WORK: "bold red",
    Band.NO_CHECKS: "bold yellow",
}


def render_mosaic(outcomes: List[bool], width: int = MOSAIC_WIDTH) -> Text:
    """Render one cell per check outcome, in tally order, wrapping every `width` cells."""
    mosaic = Text()
    for i, passed in enumerate(outcomes):
        if i and i % width == 0:
            mosaic.append("\n")
        if passed:
            mosaic.append(PASSED_CELL, style="green")
        else:
            mosaic.append(FAILED_CELL, style="red")
    return mosaic


def band_message(band: Band) -> str:
    return _BAND_MESSAGES[band]


class UniformityReporter:
    """Handles reporting of uniformity check results."""

    def __init__(self, output_file: Optional[str] = None, no_color: bool = False):
        self.output_file = Path(output_file) if output_file else None
        # rich drops styles itself when stdout is not a terminal or NO_COLOR is set
        self.console = Console(
            no_color=no_color or None,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def report_results(self, results: CheckResults, format_type: str = "console") -> bool:
        """Report results. Returns True only when every check passed."""
        if self.output_file:
            self._write_json_report(results)

        if format_type == "json":
            self._display_json_output(results)
        else:
            self._display_console_report(results)

        return results.is_perfect()

    # ------------------------------------------------------------------
    # JSON report
    # ------------------------------------------------------------------

    def _report_data(self, results: CheckResults) -> Dict:
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        return report_data

    def _write_json_report(self, results: CheckResults) -> None:
        """Write detailed JSON report to file."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_file, 'w', encoding='utf-8') as f:
            json.dump(self._report_data(results), f, indent=2, default=str)

    def _display_json_output(self, results: CheckResults) -> None:
        print(json.dumps(self._report_data(results), indent=2, default=str))

    # ------------------------------------------------------------------
    # Console report
    # ------------------------------------------------------------------

    def _display_console_report(self, results: CheckResults) -> None:
        out = self.console
        out.print("=" * 50, style="bold magenta")
        out.print("🔍 UNIFORMITY CHECKER", style="bold magenta")
        out.print("=" * 50, style="bold magenta")
        out.print(f"📂 Checking project: {results.project_path}", style="cyan")
        out.print(f"📋 Using rules: {results.rules_path}", style="cyan")

        for section in SECTIONS:
            self._display_structure(results, section)
            self._display_patterns(results, section)

        self.display_mosaic(results)

        if not results.is_perfect():
            self.display_issues(results)

        if self.output_file:
            out.print(f"Detailed report: {self.output_file}")

    def _display_structure(self, results: CheckResults, section: str) -> None:
        self.console.print(f"\n📁 Checking {section} Structure...\n", style="bold cyan")
        for item in results.structure:
            if item.section == section:
                self._print_status(item.exists, item.path)

    def _display_patterns(self, results: CheckResults, section: str) -> None:
        self.console.print(f"\n🔍 Checking {section} Code Patterns...\n", style="bold cyan")
        for result in results.patterns:
            if result.section != section:
                continue
            name = result.label if result.label != CONTEXT_LABEL else Path(result.file).name
            for check in result.checks:
                self._print_status(check.passed, f"{name}: {check.description}")

        for warning in results.warnings:
            if warning.section == section:
                self.console.print(f"⚠️  {warning.message}", style="yellow")

    def _print_status(self, passed: bool, message: str) -> None:
        if passed:
            self.console.print(f"✅ {message}", style="green")
        else:
            self.console.print(f"❌ {message}", style="red")

    def display_mosaic(self, results: CheckResults) -> None:
        """Print the percentage, the mosaic grid and the score band."""
        out = self.console
        tally = results.tally
        out.print()
        out.print("=" * 50, style="bold")
        out.print(f"📊 PROJECT UNIFORMITY: {results.percentage()}%", style="bold cyan")
        out.print("=" * 50, style="bold")
        out.print()

        if tally.total_checks == 0:
            out.print("No checks configured", style="yellow")
        else:
            out.print(render_mosaic(tally.outcomes))

        out.print()
        out.print("Summary:", style="bold")
        out.print(f"✅ Passed: {tally.passed_checks}/{tally.total_checks}", style="green")
        out.print(f"❌ Failed: {tally.failed_checks}/{tally.total_checks}", style="red")
        out.print()
        out.print(band_message(results.band()), style=_BAND_STYLES[results.band()])
        out.print()

    def display_issues(self, results: CheckResults) -> None:
        """List every missing file/folder and every file with pattern issues."""
        out = self.console
        out.print("🔧 Issues to Fix:", style="bold red")
        out.print()

        missing = results.missing_structure()
        if missing:
            out.print("Missing Files/Folders:", style="bold")
            for item in missing:
                out.print(f"  • {item.section}/{item.path}", style="red")
            out.print()

        with_issues = results.patterns_with_issues()
        if with_issues:
            out.print("Code Pattern Issues:", style="bold")
            for result in with_issues:
                out.print(f"  {result.section}/{result.file}:", style="yellow")
                for issue in result.issues:
                    out.print(f"    - {issue}", style="red")
            out.print()
