"""Slack mrkdwn rendering for the weather (incident) and issue blocks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from debrief_app.core.config import CLOSED_STATUS, NO_SUMMARY, NOBODY, WEATHER_HEADER
from debrief_app.core.models import Incident, IssueModel
from debrief_app.core.status import StatusGlyphs, display_status


@dataclass(frozen=True, slots=True)
class Report:
    weather: str
    issues: str

    @property
    def text(self) -> str:
        return "\n".join([self.weather, self.issues])


def incident_line(incident: Incident) -> str:
    return f"<{incident.url}|#{incident.number}> {incident.title} ({incident.status})"


def render_incidents(incidents: Iterable[Incident]) -> str:
    """Weather block: fixed header, then one line per incident in fetch order."""
    out = WEATHER_HEADER + "\n"
    for incident in incidents:
        out += incident_line(incident) + "\n"
    return out


def owner_annotation(issue: IssueModel, status: str) -> str | None:
    """``@assignee`` for open work; closed work has no single owner.

    Only the exact ``Closed`` status suppresses the annotation.
    """
    if status == CLOSED_STATUS:
        return None
    return f"@{issue.assignee or NOBODY}"


def issue_line(issue: IssueModel, status: str) -> str:
    # The owner attaches directly to the summary, no separator
    owner = owner_annotation(issue, status) or ""
    return f"<{issue.permalink}|{issue.key}> {issue.summary or NO_SUMMARY}{owner}"


def group_issues(issues: Iterable[IssueModel], glyphs: StatusGlyphs) -> dict[str, list[str]]:
    """Group rendered issue lines under their decorated status label.

    Returns a dict ordered by label string; lines within a label keep input order.
    """
    grouped: dict[str, list[str]] = {}
    for issue in issues:
        status = display_status(issue.status)
        grouped.setdefault(glyphs.decorate(status), []).append(issue_line(issue, status))
    return {label: grouped[label] for label in sorted(grouped)}


def render_issue_groups(groups: dict[str, list[str]]) -> str:
    out = ""
    for label, lines in groups.items():
        out += label + "\n" + "\n".join(lines) + "\n"
    return out


def build_report(
    incidents: Iterable[Incident],
    closed: Iterable[IssueModel],
    in_flight: Iterable[IssueModel],
    glyphs: StatusGlyphs,
) -> Report:
    issues = [*closed, *in_flight]
    return Report(
        weather=render_incidents(incidents),
        issues=render_issue_groups(group_issues(issues, glyphs)),
    )
