"""PagerDuty REST v2 client wrapper (incident listing only)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import requests

from .config import HTTP_TIMEOUT_SECONDS, OPEN_INCIDENT_STATUSES, PAGERDUTY_ACCEPT, PAGERDUTY_INCIDENTS_URL


class PagerDutyAPI:
    def __init__(
        self,
        token: str,
        *,
        url: str = PAGERDUTY_INCIDENTS_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": PAGERDUTY_ACCEPT,
                "Authorization": f"Token token={token}",
            }
        )

    @staticmethod
    def build_params(team_ids: Sequence[str], since: str) -> list[tuple[str, str]]:
        """Query parameters as pairs so ``statuses[]``/``team_ids[]`` repeat."""
        params = [("statuses[]", status) for status in OPEN_INCIDENT_STATUSES]
        params.extend(("team_ids[]", team_id) for team_id in team_ids)
        params.append(("since", since))
        return params

    def list_incidents(self, team_ids: Sequence[str], since: str) -> list[dict[str, Any]]:
        """Return the raw ``incidents`` array for open incidents since ``since``.

        Raises ``requests.RequestException`` on transport errors and non-2xx
        responses, ``ValueError`` when the body is not the expected shape.
        """
        resp = self.session.get(self.url, params=self.build_params(team_ids, since), timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        incidents = data.get("incidents") if isinstance(data, dict) else None
        if not isinstance(incidents, list):
            raise ValueError("PagerDuty response has no 'incidents' list")
        return incidents
