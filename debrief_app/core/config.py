"""Central configuration, constants, and environment-backed settings."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import pytz

from .errors import ConfigError

# =============================================================================
# Jira Settings
# =============================================================================
DEFAULT_PROJECT = "Core Services"

CLOSED_RECENTLY_JQL = (
    'project = "{project}" AND status in (Closed) and resolutiondate >= -{days}d'
)
IN_FLIGHT_JQL = (
    'project = "{project}" AND status in ("In Progress", "In Review") order by status, assignee'
)

# Only the fields the report renders
JIRA_FETCH_FIELDS: Sequence[str] = ("summary", "status", "assignee")
JIRA_PAGE_SIZE = 100

# =============================================================================
# PagerDuty Settings
# =============================================================================
PAGERDUTY_INCIDENTS_URL = "https://api.pagerduty.com/incidents"
PAGERDUTY_ACCEPT = "application/vnd.pagerduty+json;version=2"
OPEN_INCIDENT_STATUSES: Sequence[str] = ("triggered", "acknowledged")

# =============================================================================
# Report Layout
# =============================================================================
WEATHER_HEADER = "⛅ *Weather Report*"
UNKNOWN_STATUS = "Unknown Status"
NO_SUMMARY = "no summary"
NOBODY = "nobody"
CLOSED_STATUS = "Closed"

DEFAULT_STATUS_GLYPHS: Mapping[str, str] = {
    "In Progress": "👩🏻‍💻",
    "In Review": "👩🏼‍🔬",
    "Closed": "🎉",
}
DEFAULT_FALLBACK_GLYPH = ":shrug:"

# =============================================================================
# Runtime Tuning
# =============================================================================
DEFAULT_TIMEZONE = "UTC"
HTTP_TIMEOUT_SECONDS = 10.0
# Incidents, closed-recently, in-flight
FETCH_MAX_WORKERS = 3

REQUIRED_ENV: Sequence[str] = (
    "PD_TOKEN",
    "PD_TEAM_IDS",
    "JIRA_HOST",
    "JIRA_USER",
    "JIRA_PASSWORD",
)


def _split_team_ids(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class DebriefSettings:
    pd_token: str
    pd_team_ids: tuple[str, ...]
    jira_host: str
    jira_user: str
    jira_password: str
    jira_project: str = DEFAULT_PROJECT
    timezone: str = DEFAULT_TIMEZONE
    status_glyphs_path: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DebriefSettings:
        """Build settings from environment variables.

        Parameters
        ----------
        environ : Mapping[str, str], optional
            Source mapping; defaults to ``os.environ``.

        Raises
        ------
        ConfigError
            If any required variable is missing or empty, or if
            ``PD_TEAM_IDS`` names no team, or if ``DEBRIEF_TIMEZONE`` is
            not a known zone.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in REQUIRED_ENV if not env.get(name)]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
        team_ids = _split_team_ids(env["PD_TEAM_IDS"])
        if not team_ids:
            raise ConfigError("PD_TEAM_IDS must list at least one team id")
        timezone = env.get("DEBRIEF_TIMEZONE") or DEFAULT_TIMEZONE
        try:
            pytz.timezone(timezone)
        except pytz.UnknownTimeZoneError as exc:
            raise ConfigError(f"Unknown DEBRIEF_TIMEZONE: {timezone}") from exc
        return cls(
            pd_token=env["PD_TOKEN"],
            pd_team_ids=team_ids,
            jira_host=env["JIRA_HOST"],
            jira_user=env["JIRA_USER"],
            jira_password=env["JIRA_PASSWORD"],
            jira_project=env.get("JIRA_PROJECT") or DEFAULT_PROJECT,
            timezone=timezone,
            status_glyphs_path=env.get("DEBRIEF_STATUS_GLYPHS") or None,
        )
