import sys
from pathlib import Path
from unittest.mock import patch

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from fastapi.testclient import TestClient

from pact_message.api import app


def test_messages_endpoint_describes_json_message():
    client = TestClient(app)
    resp = client.post(
        "/messages",
        json={
            "description": "an order event",
            "providerStates": [{"name": "an order exists"}],
            "metaData": {"contentType": "application/json"},
            "contents": {"id": 10},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["key"] == "an order exists_an order event"
    assert data["contentType"] == "application/json"
    assert data["formattedBody"] == '{\n  "id": 10\n}'
    assert data["message"] == {
        "description": "an order event",
        "metaData": {"contentType": "application/json"},
        "contents": {"id": 10},
        "providerStates": [{"name": "an order exists"}],
    }


def test_messages_endpoint_renders_binary_body_as_base64():
    client = TestClient(app)
    resp = client.post(
        "/messages",
        json={
            "description": "blob",
            "metaData": {"content-type": "application/octet-stream"},
            "contents": "\u0000ÿ",
            "providerState": "legacy",
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["key"] == "legacy_blob"
    assert data["contentType"] == "application/octet-stream"
    assert data["formattedBody"] == "AMO/"


def test_messages_endpoint_without_body():
    client = TestClient(app)
    resp = client.post("/messages", json={"description": "ping"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["key"] == "None_ping"
    assert data["contentType"] is None
    assert data["formattedBody"] == ""
    assert "contents" not in data["message"]


@patch("pact_message.api.settings")
def test_messages_endpoint_uses_configured_spec_version(mock_settings):
    mock_settings.spec_version = "4.0.0"
    client = TestClient(app)
    resp = client.post(
        "/messages",
        json={
            "description": "d",
            "matchingRules": {"body": {"$.id": {"matchers": [{"match": "type"}]}}},
        },
    )
    assert resp.status_code == 200
    assert resp.json()["message"]["matchingRules"] == {
        "body": {"$.id": {"matchers": [{"match": "type"}]}}
    }


def test_messages_endpoint_rejects_missing_description():
    client = TestClient(app)
    resp = client.post("/messages", json={"contents": "hi"})
    assert resp.status_code == 400
    data = resp.json()
    assert data["error_type"] == "parse_error"
    assert "description" in data["error"]


def test_messages_endpoint_rejects_non_object_payload():
    client = TestClient(app)
    resp = client.post("/messages", json=["not", "a", "message"])
    assert resp.status_code == 400
    assert resp.json()["error_type"] == "parse_error"


def test_messages_endpoint_accepts_text_the_declared_charset_cannot_hold():
    client = TestClient(app)
    resp = client.post(
        "/messages",
        json={
            "description": "d",
            "metaData": {"contentType": "text/plain; charset=ascii"},
            "contents": "héllo",
        },
    )
    assert resp.status_code == 200
    assert resp.json()["formattedBody"] == "h?llo"
