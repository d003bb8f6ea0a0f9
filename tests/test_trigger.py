import base64
import json

import pytest

from debrief_app.core.errors import PayloadError
from debrief_app.trigger import parse_response_url

URL = "https://hooks.slack.com/commands/T/1/x"


def test_form_encoded_body():
    event = {"body": "token=abc&response_url=https%3A%2F%2Fhooks.slack.com%2Fcommands%2FT%2F1%2Fx"}
    assert parse_response_url(event) == URL


def test_json_body():
    event = {"headers": {"content-type": "application/json"}, "body": json.dumps({"response_url": URL})}
    assert parse_response_url(event) == URL


def test_base64_body():
    body = base64.b64encode(f"response_url={URL}".encode()).decode()
    assert parse_response_url({"body": body, "isBase64Encoded": True}) == URL


@pytest.mark.parametrize(
    "event",
    [
        {},
        {"body": "token=abc"},
        {"headers": {"Content-Type": "application/json"}, "body": "{not json"},
        {"headers": {"Content-Type": "application/json"}, "body": "[]"},
        {"body": "***", "isBase64Encoded": True},
    ],
)
def test_malformed_payloads(event):
    with pytest.raises(PayloadError):
        parse_response_url(event)
