"""
curl_parser

Turns a curl command line into a description of the HTTP request it would
send, without running curl.

    from curl_parser import parse_curl

    parsed = parse_curl("curl -u tobi:ferret -d a=b https://api.example.com")
    parsed.to_json()        # {"url": ..., "method": "POST", "header": {...}, "body": "a=b", ...}
    parsed.to_request()     # requests.Request, ready for Session.prepare_request
"""

from typing import Sequence, Union

import requests

from .config import ParserConfig
from .errors import (
    ConfigurationError,
    CurlError,
    CurlParseError,
    DataFileError,
    InvalidCommandError,
    InvalidURLError,
    MissingURLError,
    TokenizeError,
)
from .models import ParsedRequest, SerializedBody
from .parser import CurlParser, parse_curl
from .request import build_request, prepare_request

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "CurlError",
    "CurlParseError",
    "CurlParser",
    "DataFileError",
    "InvalidCommandError",
    "InvalidURLError",
    "MissingURLError",
    "ParsedRequest",
    "ParserConfig",
    "SerializedBody",
    "TokenizeError",
    "build_request",
    "new_request",
    "parse_curl",
    "prepare_request",
]


def new_request(curl_cmd: Union[str, Sequence[str]]) -> requests.Request:
    """Parse a curl command and build a requests.Request from it."""
    return build_request(parse_curl(curl_cmd))
