from __future__ import annotations

import base64
import json

import pytest

from curl_parser import ParsedRequest, SerializedBody, parse_curl


def test_serialize_without_body() -> None:
    assert json.loads(parse_curl("curl http://example.com").to_json()) == {
        "url": "http://example.com",
        "method": "GET",
        "header": {},
    }


def test_serialize_headers_as_lists() -> None:
    got = parse_curl("curl -H 'X-A: 1' -H 'X-A: 2' -A slothy http://example.com").to_dict()
    assert got["header"] == {"X-A": ["1", "2"], "User-Agent": ["slothy"]}


def test_serialize_without_url() -> None:
    assert ParsedRequest().to_dict() == {"url": "", "method": "GET", "header": {}}


def test_serialize_text_body() -> None:
    p = ParsedRequest(url="https://api.example.com", method="POST", body=b'{"message":"hello"}')
    result = json.loads(p.to_json())
    assert result["body_encoding"] == "plain"
    assert result["body"] == '{"message":"hello"}'


def test_serialize_binary_body() -> None:
    data = bytes([0x00, 0x01, 0x02, 0xFF, 0xFE, 0xFD])
    p = ParsedRequest(url="https://api.example.com", method="POST", body=data)
    result = json.loads(p.to_json())
    assert result["body_encoding"] == "base64"
    assert base64.b64decode(result["body"]) == data


def test_serialize_keeps_non_ascii_text() -> None:
    p = ParsedRequest(url="https://a.example", body="привет".encode("utf-8"))
    assert p.to_dict()["body"] == "привет"
    assert "привет" in p.to_json()


@pytest.mark.parametrize(
    "body",
    [
        b"a",
        b"foo=bar&bar=baz",
        "ünïcödé".encode("utf-8"),
        b"\x00\x01\xff",
        b"\xed\xa0\x80",
        bytes(range(256)),
    ],
)
def test_body_round_trip(body: bytes) -> None:
    p = ParsedRequest(url="https://a.example", method="PUT", headers={"A": ["1"]}, body=body)
    doc = json.loads(p.to_json())
    assert SerializedBody(doc["body_encoding"], doc["body"]).to_bytes() == body
    assert ParsedRequest.from_json(p.to_json()) == p


def test_from_dict_defaults() -> None:
    assert ParsedRequest.from_dict({"url": "", "header": {}}) == ParsedRequest()
    assert ParsedRequest.from_dict({"url": "http://a.example", "body": "x"}).body == b"x"


def test_serialized_body_from_bytes() -> None:
    assert SerializedBody.from_bytes(b"text") == SerializedBody("plain", "text")
    assert SerializedBody.from_bytes(b"\xff") == SerializedBody("base64", "/w==")


def test_serialized_body_unknown_encoding() -> None:
    with pytest.raises(ValueError, match="unknown body encoding"):
        SerializedBody("hex", "ff").to_bytes()


def test_to_json_indent() -> None:
    text = ParsedRequest(url="http://a.example").to_json(indent=2)
    assert text.startswith("{\n  ")
