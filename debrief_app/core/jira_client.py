"""Jira API client wrapper (REST v3 enhanced search pagination)."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from jira import JIRA, JIRAError
from requests.exceptions import RequestException

from .config import HTTP_TIMEOUT_SECONDS, JIRA_PAGE_SIZE
from .errors import JiraClientError


class JiraAPI:
    def __init__(self, server: str, user: str, password: str, *, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.server = server.rstrip("/")
        self.timeout = timeout
        try:
            self.client = JIRA(
                basic_auth=(user, password),
                options={"server": self.server, "rest_api_version": "3"},
                timeout=timeout,
                max_retries=0,
                # No serverInfo round trip; an unreachable Jira only empties the searches
                get_server_info=False,
            )
        except (JIRAError, RequestException) as exc:
            raise JiraClientError(f"Failed to create Jira client for {self.server}: {exc}") from exc

    def permalink(self, key: str) -> str:
        return f"{self.server}/browse/{key}"

    def iter_search(
        self,
        jql: str,
        fields: Sequence[str] | None = None,
        page_size: int = JIRA_PAGE_SIZE,
    ) -> Iterator[dict[str, Any]]:
        """Yield raw issue JSON page by page, following ``nextPageToken``.

        Results come back in the order the JQL requests; pages are fetched
        only as the caller consumes them.
        """
        session = getattr(self.client, "_session", None)
        if session is None:
            raise RuntimeError("JIRA session unavailable")
        url = f"{self.server}/rest/api/3/search/jql"
        params: dict[str, Any] = {"jql": jql, "maxResults": page_size}
        if fields:
            params["fields"] = ",".join(fields)
        token = None
        while True:
            qp = dict(params)
            if token:
                qp["nextPageToken"] = token
            resp = session.get(url, params=qp, timeout=self.timeout)
            if resp.status_code >= 400:
                raise RuntimeError(f"Jira search failed {resp.status_code}: {resp.text[:200]}")
            data = resp.json()
            yield from data.get("issues", [])
            token = data.get("nextPageToken")
            if not token or data.get("isLast") is True:
                break
