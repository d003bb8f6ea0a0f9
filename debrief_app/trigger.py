"""Extract the delivery URL from an API Gateway slash-command event."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from urllib.parse import parse_qs

from debrief_app.core.errors import PayloadError


def _header(event: dict[str, Any], name: str) -> str:
    headers = event.get("headers") or {}
    for key, value in headers.items():
        if key.lower() == name:
            return str(value or "")
    return ""


def _decode_body(event: dict[str, Any]) -> str:
    body = event.get("body")
    if body is None:
        raise PayloadError("Trigger event has no body")
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise PayloadError(f"Trigger body is not valid base64: {exc}") from exc
    return str(body)


def parse_response_url(event: dict[str, Any]) -> str:
    """Return ``response_url`` from a form-encoded or JSON request body.

    Raises
    ------
    PayloadError
        If the body is missing, undecodable, or has no ``response_url``.
    """
    if not isinstance(event, dict):
        raise PayloadError(f"Unexpected trigger event type: {type(event)!r}")
    body = _decode_body(event)
    if "json" in _header(event, "content-type"):
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise PayloadError(f"Trigger body is not valid JSON: {exc}") from exc
        url = payload.get("response_url") if isinstance(payload, dict) else None
    else:
        # Slack slash commands post application/x-www-form-urlencoded
        url = (parse_qs(body).get("response_url") or [None])[0]
    if not url:
        raise PayloadError("Trigger payload has no response_url")
    return str(url)
