from typing import Dict, List

import requests

from .errors import MissingURLError
from .models import ParsedRequest

# несколько значений одного заголовка склеиваем так же, как это делает curl
_JOINERS = {"Cookie": "; "}


def build_headers(headers: Dict[str, List[str]]) -> Dict[str, str]:
    return {name: _JOINERS.get(name, ", ").join(values) for name, values in headers.items()}


def build_request(parsed: ParsedRequest) -> requests.Request:
    """
    Build a requests.Request from a parsed command.

    Method and URL are used verbatim. An empty body is passed as data=None,
    so the prepared request has no body at all.
    """
    if parsed.url is None:
        raise MissingURLError("cannot build request: curl command has no URL")
    return requests.Request(
        method=parsed.method,
        url=parsed.url,
        headers=build_headers(parsed.headers),
        data=parsed.body or None,
    )


def prepare_request(parsed: ParsedRequest) -> requests.PreparedRequest:
    return build_request(parsed).prepare()
