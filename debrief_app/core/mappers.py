"""Mapping raw PagerDuty and Jira JSON into domain models."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .models import Incident, IssueModel


def map_incident(raw: dict[str, Any]) -> Incident:
    try:
        return Incident(
            number=int(raw["incident_number"]),
            title=str(raw["title"]),
            status=str(raw["status"]),
            url=str(raw["html_url"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed incident record: {exc!r}") from exc


def _user_name(user: Any) -> str | None:
    if not isinstance(user, dict):
        return None
    # Server/DC exposes "name"; Cloud only has "displayName"
    return user.get("name") or user.get("displayName") or None


def map_issue(raw: dict[str, Any], permalink: Callable[[str], str]) -> IssueModel:
    key = raw.get("key")
    if not key:
        raise ValueError("Jira issue without a key")
    fields = raw.get("fields") or {}
    status = fields.get("status")
    return IssueModel(
        key=key,
        permalink=permalink(key),
        summary=fields.get("summary") or None,
        status=(status.get("name") or None) if isinstance(status, dict) else None,
        assignee=_user_name(fields.get("assignee")),
    )
