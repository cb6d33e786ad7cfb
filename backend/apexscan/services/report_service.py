"""Markdown report for a scan result."""

import json
from typing import Any

from apexscan.models import ScanResult, SeveritySource

RUNTIME_SEVERITY_MARKER = "💡"


def format_scan_report(class_name: str, result: ScanResult, runtime_data_used: bool) -> str:
    """Render the scan result as a markdown report with fix-generation instructions."""
    total_issues = result.total_issues
    if total_issues == 0:
        return f"No antipatterns detected in class '{class_name}'."

    lines = [
        f"# Antipattern Scan Results for '{class_name}'",
        "",
        f"Found {total_issues} issue(s) across {len(result.antipattern_results)} antipattern type(s).",
        "",
    ]
    if runtime_data_used:
        lines.append("**Note:** Severity levels are based on actual runtime metrics from the org.")
    else:
        lines.append(
            "**Note:** This report is based on static analysis only. To include runtime insights, "
            "configure an org connection that has runtime data enabled."
        )

    lines += [
        "",
        "## Scan Results",
        "",
        "Results are grouped by antipattern type. Each type has:",
        "- **fixInstruction**: How to fix this antipattern type (applies to all instances)",
        "- **detectedInstances**: All detected instances of this type",
        "",
        f"**Legend:** {RUNTIME_SEVERITY_MARKER} = Severity calculated from actual runtime metrics",
        "",
        "```json",
        json.dumps(display_results(result), indent=2, ensure_ascii=False),
        "```",
        "",
        "## Instructions for Fix Generation",
        "",
        "The scan result may contain several antipattern types. For each type:",
        "1. Read the `fixInstruction`, which explains how to fix this antipattern",
        "2. For each instance in `detectedInstances`:",
        "   - Examine `codeBefore` (the problematic code)",
        "   - Consider `severity` (LOW/MEDIUM/HIGH/CRITICAL)",
        "   - Generate the fixed code following the instruction",
        "",
        "Generate fixes for all detected instances across all antipattern types.",
    ]
    return "\n".join(lines) + "\n"


def display_results(result: ScanResult) -> dict[str, Any]:
    """Wire form of the result with runtime severities marked and `severitySource` dropped."""
    payload = result.to_dict()
    for antipattern in payload["antipatternResults"]:
        for instance in antipattern["detectedInstances"]:
            source = instance.pop("severitySource", None)
            if source == SeveritySource.RUNTIME.value:
                instance["severity"] = f"{RUNTIME_SEVERITY_MARKER} {instance['severity']}"
    return payload
