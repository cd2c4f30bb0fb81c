import base64
import logging
import os
from enum import Enum
from typing import Optional, Sequence, Union
from urllib.parse import urlsplit

from .config import ParserConfig
from .errors import InvalidURLError
from .expander import Token, expand_data_args
from .models import ParsedRequest
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class _State(Enum):
    BLANK = ""
    HEADER = "header"
    USER_AGENT = "user-agent"
    DATA = "data"
    USER = "user"
    METHOD = "method"
    COOKIE = "cookie"


# флаги, которые ждут значение следующим токеном
FLAG_STATES = {
    "-A": _State.USER_AGENT,
    "--user-agent": _State.USER_AGENT,
    "-H": _State.HEADER,
    "--header": _State.HEADER,
    "-d": _State.DATA,
    "--data": _State.DATA,
    "--data-ascii": _State.DATA,
    "--data-raw": _State.DATA,
    "--data-binary": _State.DATA,
    "--data-urlencode": _State.DATA,
    "-u": _State.USER,
    "--user": _State.USER,
    "-X": _State.METHOD,
    "--request": _State.METHOD,
    "-b": _State.COOKIE,
    "--cookie": _State.COOKIE,
}
HEAD_FLAGS = ("-I", "--head")
COMPRESSED_FLAG = "--compressed"


def is_url(token: Token) -> bool:
    return isinstance(token, str) and token.startswith(("http://", "https://"))


def check_url(url: str) -> str:
    try:
        parts = urlsplit(url)
        parts.port  # ValueError на кривом порту
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e
    if not parts.hostname:
        raise InvalidURLError(url, "no host supplied")
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidURLError(url, "whitespace in host")
    return url


class CurlParser:
    def __init__(
        self,
        working_directory: Union[str, os.PathLike, None] = None,
        config: Optional[ParserConfig] = None,
    ):
        self.config = config if config is not None else ParserConfig(working_directory)

    def parse(self, curl_cmd: Union[str, Sequence[str]]) -> ParsedRequest:
        """
        Разбирает команду curl (без запуска shell).
        Поддержка:
          -A / --user-agent UA
          -H / --header "Name: value"
          -d / --data / --data-ascii / --data-raw / --data-binary (и @file)
          --data-urlencode content | =content | name=content | name@file | @file
          -u / --user user:pass (Basic)
          -I / --head  -> METHOD=HEAD
          -X / --request METHOD
          -b / --cookie "a=b; c=d"
          --compressed -> Accept-Encoding: deflate, gzip
        Остальные ключи и их значения игнорируются.
        """
        args = tokenize(curl_cmd)
        args = expand_data_args(args, self.config.working_directory)

        out = ParsedRequest()
        state = _State.BLANK

        for a in args:
            if is_url(a):
                # берем только первый URL
                if out.url is None:
                    out.url = check_url(a)
                continue
            if a in FLAG_STATES:
                state = FLAG_STATES[a]
            elif a in HEAD_FLAGS:
                out.method = "HEAD"
            elif a == COMPRESSED_FLAG:
                if "Accept-Encoding" not in out.headers:
                    out.add_header("Accept-Encoding", "deflate, gzip")
            elif state is not _State.BLANK and (a or isinstance(a, bytes)):
                # значение data-флага уже развернуто в bytes и занимает флаг, даже пустое
                self._consume(out, state, a)
                state = _State.BLANK

        logger.debug("parsed curl command: %s %s, %d header(s), %d body bytes",
                     out.method, out.url, len(out.headers), len(out.body))
        return out

    def _consume(self, out: ParsedRequest, state: _State, a: Token):
        if state is _State.DATA:
            if out.method in ("GET", "HEAD"):
                out.method = "POST"
            data = a if isinstance(a, bytes) else a.encode("utf-8")
            if data:
                out.body = data if not out.body else out.body + b"&" + data
            return

        if isinstance(a, bytes):
            a = a.decode("utf-8", "replace")

        if state is _State.HEADER:
            name, sep, value = a.partition(":")
            if sep:
                out.add_header(name.strip(), value.strip())
        elif state is _State.USER_AGENT:
            out.add_header("User-Agent", a)
        elif state is _State.USER:
            token = base64.b64encode(a.encode("utf-8")).decode("ascii")
            out.add_header("Authorization", f"Basic {token}")
        elif state is _State.METHOD:
            out.method = a
        elif state is _State.COOKIE:
            out.add_header("Cookie", a)


def parse_curl(curl_cmd: Union[str, Sequence[str]]) -> ParsedRequest:
    """Convenience function to parse a curl command relative to the current directory."""
    return CurlParser().parse(curl_cmd)
