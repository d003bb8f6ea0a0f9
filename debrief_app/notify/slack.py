"""Deliver the rendered debrief to a Slack ``response_url``."""

from __future__ import annotations

import logging

import requests

from debrief_app.core.config import HTTP_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def send_report(
    response_url: str,
    text: str,
    *,
    session: requests.Session | None = None,
    timeout: float = HTTP_TIMEOUT_SECONDS,
) -> bool:
    """POST ``{"text": text}`` to ``response_url``.

    Delivery is best effort: failures are logged and reported through the
    return value, never raised.
    """
    http = session or requests
    try:
        response = http.post(response_url, json={"text": text}, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        logger.error("Failed to deliver debrief: %s", exc)
        return False
    logger.info("Debrief delivered (%s chars)", len(text))
    return True
