"""
HN Sort Check — Report Formatting

Renders a ValidationReport as the plain-text block printed to stdout.
"""

from __future__ import annotations

from src.validator import ValidationReport, Verdict

REPORT_TITLE = "--- Hacker News Sort Validation ---"


def format_report(report: ValidationReport) -> str:
    """Build the human-readable summary for a finished validation pass."""
    lines = [
        "",
        REPORT_TITLE,
        f"Pages visited: {report.pages_visited}",
        f"Articles checked: {report.articles_checked}",
    ]

    if report.verdict == Verdict.INSUFFICIENT:
        lines.append(
            f"❌ Only found {report.articles_checked} articles. Expected {report.target_count}."
        )
    elif report.verdict == Verdict.SORTED:
        lines.append(
            f"✅ The first {report.target_count} articles are sorted from newest to oldest."
        )
    else:
        lines.append(
            f"❌ The first {report.target_count} articles are NOT sorted from newest to oldest."
        )
        if report.first_violation_index is not None:
            i = report.first_violation_index
            lines.append(
                f"   First violation: article {i + 1} ({report.timestamps[i]}) "
                f"is older than article {i + 2} ({report.timestamps[i + 1]})."
            )

    lines.append("-" * len(REPORT_TITLE))
    lines.append("")
    return "\n".join(lines)
