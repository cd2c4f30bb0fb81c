import base64
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

BODY_PLAIN = "plain"
BODY_BASE64 = "base64"


class SerializedBody(NamedTuple):
    """Body as it is stored in JSON: text as is, anything else in base64."""

    encoding: str
    content: str

    @classmethod
    def from_bytes(cls, data: bytes) -> "SerializedBody":
        try:
            return cls(BODY_PLAIN, data.decode("utf-8"))
        except UnicodeDecodeError:
            return cls(BODY_BASE64, base64.b64encode(data).decode("ascii"))

    def to_bytes(self) -> bytes:
        if self.encoding == BODY_PLAIN:
            return self.content.encode("utf-8")
        if self.encoding == BODY_BASE64:
            return base64.b64decode(self.content, validate=True)
        raise ValueError(f"unknown body encoding: {self.encoding!r}")


@dataclass
class ParsedRequest:
    """Request described by a curl command."""

    url: Optional[str] = None
    method: str = "GET"
    headers: Dict[str, List[str]] = field(default_factory=dict)
    body: bytes = b""

    def add_header(self, name: str, value: str):
        self.headers.setdefault(name, []).append(value)

    def get_header(self, name: str) -> Optional[str]:
        """First value of the header, names are matched exactly."""
        values = self.headers.get(name)
        return values[0] if values else None

    def to_request(self):
        from .request import build_request
        return build_request(self)

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "url": self.url or "",
            "method": self.method,
            "header": {name: list(values) for name, values in self.headers.items()},
        }
        if self.body:
            body = SerializedBody.from_bytes(self.body)
            out["body"] = body.content
            out["body_encoding"] = body.encoding
        return out

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedRequest":
        body = b""
        if data.get("body"):
            body = SerializedBody(data.get("body_encoding") or BODY_PLAIN, data["body"]).to_bytes()
        return cls(
            url=data.get("url") or None,
            method=data.get("method") or "GET",
            headers={name: list(values) for name, values in (data.get("header") or {}).items()},
            body=body,
        )

    @classmethod
    def from_json(cls, text: str) -> "ParsedRequest":
        return cls.from_dict(json.loads(text))
