import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from pact_message.content_type import (
    JSON,
    ContentType,
    ContentTypeError,
    content_type_of,
    is_json,
    is_octet_stream,
    parse_content_type,
    resolve,
)


def test_parse_content_type_with_charset():
    content_type = parse_content_type("text/plain; charset=UTF-8")
    assert content_type.mime_type == "text/plain"
    assert content_type.charset == "UTF-8"
    assert content_type.charset_or_default() == "UTF-8"


def test_parse_content_type_without_charset_defaults_to_utf8():
    content_type = parse_content_type("application/json")
    assert content_type == ContentType(mime_type=JSON)
    assert content_type.charset_or_default() == "utf-8"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        'text/"plain"',
        "text/plain, text/html",
        "text/plain; charset=no-such-charset",
        "text/plain; charset=base64",
        "text/plain; charset=zlib",
        "text/plain; charset=hex",
    ],
)
def test_parse_content_type_rejects_malformed_values(text):
    with pytest.raises(ContentTypeError):
        parse_content_type(text)


def test_resolve_matches_keys_case_insensitively():
    assert resolve({"Content-Type": "text/plain"}).mime_type == "text/plain"
    assert resolve({"CONTENTTYPE": JSON}).mime_type == JSON
    assert resolve({"contentType": "application/xml"}).mime_type == "application/xml"


def test_resolve_ignores_unrelated_keys():
    assert resolve({}) is None
    assert resolve({"destination": "queue", "type": "text/plain"}) is None


def test_resolve_treats_null_and_blank_values_as_absent():
    assert resolve({"contentType": None}) is None
    assert resolve({"contentType": "  "}) is None


def test_resolve_logs_and_returns_none_for_unparseable_value(caplog):
    caplog.set_level(logging.DEBUG, logger="pact_message.content_type")
    assert resolve({"contentType": "text/plain; charset=no-such-charset"}) is None
    assert "Failed to parse content type" in caplog.text


def test_content_type_of_returns_mime_type_only():
    assert content_type_of({"content-type": "application/json; charset=UTF-8"}) == JSON
    assert content_type_of({}) is None


def test_is_json_matches_json_family():
    assert is_json("application/json")
    assert is_json("application/vnd.api+json")
    assert is_json("application/hal+json")


def test_is_json_is_case_sensitive_and_application_only():
    assert not is_json("application/JSON")
    assert not is_json("text/json")
    assert not is_json(None)


def test_is_octet_stream_requires_exact_match():
    assert is_octet_stream("application/octet-stream")
    assert not is_octet_stream("application/octet-stream2")
    assert not is_octet_stream(None)


def test_resolve_reads_boolean_values_as_lowercase_text():
    assert content_type_of({"contentType": True}) == "true"
    assert content_type_of({"contentType": False}) == "false"
