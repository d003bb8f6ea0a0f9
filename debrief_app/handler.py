"""Lambda entry point: wire settings, trigger payload, pipeline and delivery."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import date
from typing import Any

from debrief_app.core.config import DebriefSettings
from debrief_app.core.errors import DebriefError, JiraClientError
from debrief_app.core.jira_client import JiraAPI
from debrief_app.core.pagerduty_client import PagerDutyAPI
from debrief_app.core.service import DebriefService
from debrief_app.core.status import StatusGlyphs, load_status_glyphs
from debrief_app.core.window import current_date
from debrief_app.notify.slack import send_report
from debrief_app.report import Report, build_report
from debrief_app.trigger import parse_response_url

logger = logging.getLogger(__name__)

JiraFactory = Callable[[DebriefSettings], JiraAPI]


def configure_logging(level: str | None = None) -> None:
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(level_name)


def _default_jira(settings: DebriefSettings) -> JiraAPI:
    return JiraAPI(settings.jira_host, settings.jira_user, settings.jira_password)


def collect_report(
    settings: DebriefSettings,
    *,
    today: date | None = None,
    glyphs: StatusGlyphs | None = None,
    jira_factory: JiraFactory = _default_jira,
    pagerduty: PagerDutyAPI | None = None,
) -> Report:
    """Fetch every source and render the report.

    Raises ``JiraClientError`` when the Jira client cannot be built; every
    later failure degrades to an empty section.
    """
    jira = jira_factory(settings)
    service = DebriefService(
        jira,
        pagerduty or PagerDutyAPI(settings.pd_token),
        project=settings.jira_project,
    )
    data = service.fetch_all(settings.pd_team_ids, today or current_date(settings.timezone))
    glyphs = glyphs or load_status_glyphs(settings.status_glyphs_path)
    return build_report(data.incidents, data.closed, data.in_flight, glyphs)


def debrief(settings: DebriefSettings, response_url: str, **kwargs: Any) -> bool:
    """Build the report and deliver it once. Returns whether delivery succeeded."""
    logger.info("Fetching debrief info...")
    try:
        report = collect_report(settings, **kwargs)
    except JiraClientError as exc:
        logger.error("Jira client error: %s", exc)
        return False
    delivered = send_report(response_url, report.text)
    if delivered:
        logger.info("Debriefed")
    return delivered


def handler(event: dict, context: object) -> dict:
    """Slash-command handler. Always answers 200 with an empty body.

    Missing configuration and unreadable payloads abort before any fetch and
    are only visible in the logs.
    """
    configure_logging()
    try:
        settings = DebriefSettings.from_env()
        response_url = parse_response_url(event)
    except DebriefError as exc:
        logger.error("Debrief aborted: %s", exc)
    else:
        debrief(settings, response_url)
    return {"statusCode": 200, "body": ""}
