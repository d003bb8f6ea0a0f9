"""Report rendering for the daily debrief."""

from debrief_app.report.formatter import (
    Report,
    build_report,
    group_issues,
    incident_line,
    issue_line,
    owner_annotation,
    render_incidents,
    render_issue_groups,
)

__all__ = [
    "Report",
    "build_report",
    "group_issues",
    "incident_line",
    "issue_line",
    "owner_annotation",
    "render_incidents",
    "render_issue_groups",
]
