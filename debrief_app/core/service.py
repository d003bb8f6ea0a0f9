"""DebriefService: runs the incident and issue queries for one debrief."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date

from .config import (
    CLOSED_RECENTLY_JQL,
    DEFAULT_PROJECT,
    FETCH_MAX_WORKERS,
    IN_FLIGHT_JQL,
    JIRA_FETCH_FIELDS,
)
from .jira_client import JiraAPI
from .mappers import map_incident, map_issue
from .models import FetchResult, Incident, IssueModel
from .pagerduty_client import PagerDutyAPI
from .window import lookback_days, since_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DebriefData:
    """Snapshot of every source for one invocation."""

    lookback_days: int
    incidents: FetchResult[Incident]
    closed: FetchResult[IssueModel]
    in_flight: FetchResult[IssueModel]

    @property
    def issues(self) -> tuple[IssueModel, ...]:
        """Closed issues first, then in-flight issues."""
        return self.closed.items + self.in_flight.items


def _guarded(label: str, fetch: Callable[[], list]) -> FetchResult:
    try:
        items = tuple(fetch())
    except Exception as exc:
        cause = f"{label} fetch failed: {exc}"
        logger.warning(cause)
        return FetchResult.empty(cause)
    logger.info("Fetched %s %s", len(items), label)
    return FetchResult(items=items)


class DebriefService:
    def __init__(self, jira: JiraAPI, pagerduty: PagerDutyAPI, project: str = DEFAULT_PROJECT):
        self.jira = jira
        self.pagerduty = pagerduty
        self.project = project

    # ------------------ Queries ------------------
    def closed_recently_jql(self, days: int) -> str:
        return CLOSED_RECENTLY_JQL.format(project=self.project, days=days)

    def in_flight_jql(self) -> str:
        return IN_FLIGHT_JQL.format(project=self.project)

    # ------------------ Fetch Methods ------------------
    def fetch_incidents(self, team_ids: Sequence[str], days: int, today: date) -> FetchResult[Incident]:
        since = since_date(today, days)

        def _fetch():
            return [map_incident(raw) for raw in self.pagerduty.list_incidents(team_ids, since)]

        return _guarded("incidents", _fetch)

    def fetch_closed_recently(self, days: int) -> FetchResult[IssueModel]:
        return self._search("closed issues", self.closed_recently_jql(days))

    def fetch_in_flight(self) -> FetchResult[IssueModel]:
        return self._search("in-flight issues", self.in_flight_jql())

    def fetch_all(self, team_ids: Sequence[str], today: date) -> DebriefData:
        """Run all three queries concurrently and wait for every one of them.

        Each query fails independently; a failed query contributes an empty
        result and never cancels the others.
        """
        days = lookback_days(today)
        logger.info("Collecting debrief for %s (lookback %s day(s))", today.isoformat(), days)
        with ThreadPoolExecutor(max_workers=FETCH_MAX_WORKERS) as pool:
            incidents = pool.submit(self.fetch_incidents, team_ids, days, today)
            closed = pool.submit(self.fetch_closed_recently, days)
            in_flight = pool.submit(self.fetch_in_flight)
            return DebriefData(
                lookback_days=days,
                incidents=incidents.result(),
                closed=closed.result(),
                in_flight=in_flight.result(),
            )

    # ------------------ Internal Helpers ------------------
    def _search(self, label: str, jql: str) -> FetchResult[IssueModel]:
        def _fetch():
            # Drain the paginated cursor so aggregation works on a snapshot
            return [
                map_issue(raw, self.jira.permalink)
                for raw in self.jira.iter_search(jql, fields=list(JIRA_FETCH_FIELDS))
            ]

        logger.debug("JQL (%s): %s", label, jql)
        return _guarded(label, _fetch)
