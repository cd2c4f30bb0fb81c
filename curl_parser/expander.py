"""
Data argument expansion.

Runs before flag interpretation: every value of a data flag is replaced with
the final bytes of the body part, @file references are read and
--data-urlencode values are form-encoded.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from .errors import DataFileError

logger = logging.getLogger(__name__)

Token = Union[str, bytes]

DATA_FLAGS = (
    "-d",
    "--data",
    "--data-ascii",
    "--data-raw",
    "--data-binary",
    "--data-urlencode",
)
LONG_DATA_FLAGS = tuple(f for f in DATA_FLAGS if f.startswith("--"))


def read_data_file(path: str, working_directory: Path) -> bytes:
    full_path = Path(path)
    if not full_path.is_absolute():
        full_path = working_directory / full_path
    try:
        content = full_path.read_bytes()
    except (OSError, ValueError) as e:
        # ValueError: например, NUL-байт в пути
        raise DataFileError(path, getattr(e, "strerror", None) or str(e)) from e
    logger.debug("read %d bytes from %s", len(content), full_path)
    return content


def read_reference(value: str, working_directory: Path) -> bytes:
    """Contents of the file for "@path", the value itself otherwise."""
    if value.startswith("@") and len(value) > 1:
        return read_data_file(value[1:], working_directory)
    return value.encode("utf-8")


def form_quote(data: bytes) -> bytes:
    # как в application/x-www-form-urlencoded: пробел -> "+", & и = экранируются
    return quote_plus(data, safe="").encode("ascii")


def urlencode_value(value: str, working_directory: Path) -> bytes:
    """
    Encode a --data-urlencode value.

    Shapes, as curl understands them:
        content       -> encoded content
        =content      -> "=" + encoded content
        name=content  -> "name=" + encoded content
        name@path     -> "name=" + encoded file contents
        @path         -> encoded file contents
    """
    if value.startswith("@"):
        return form_quote(read_reference(value, working_directory))
    name, sep, content = value.partition("=")
    if sep:
        return name.encode("utf-8") + b"=" + form_quote(content.encode("utf-8"))
    name, sep, path = value.partition("@")
    if sep and path:
        return name.encode("utf-8") + b"=" + form_quote(read_data_file(path, working_directory))
    return form_quote(value.encode("utf-8"))


def expand_value(flag: str, value: str, working_directory: Path) -> bytes:
    if flag == "--data-urlencode":
        return urlencode_value(value, working_directory)
    if flag == "--data-raw":
        # --data-raw не читает файлы, "@" остается как есть
        return value.encode("utf-8")
    return read_reference(value, working_directory)


def split_data_arg(arg: Token) -> Tuple[Optional[str], Optional[str]]:
    """Return (flag, inline value) for a data flag token, (None, None) otherwise."""
    if not isinstance(arg, str):
        return None, None
    if arg in DATA_FLAGS:
        return arg, None
    for flag in LONG_DATA_FLAGS:
        if arg.startswith(flag + "="):
            return flag, arg[len(flag) + 1:]
    return None, None


def expand_data_args(args: Sequence[Token], working_directory: Path) -> List[Token]:
    """
    Expand the values of all data flags in args.

    Returns a new list; values of data flags become bytes. A glued
    "--flag=value" token is split and the expanded value is inserted right
    after the flag.
    """
    args = list(args)
    i = 0
    while i < len(args):
        flag, inline = split_data_arg(args[i])
        if flag is None:
            i += 1
            continue

        if inline is not None:
            args[i] = flag
            args.insert(i + 1, expand_value(flag, inline, working_directory))
            i += 2
            continue

        # флаг в самом конце без значения
        if i + 1 >= len(args):
            break

        value = args[i + 1]
        if isinstance(value, str):
            args[i + 1] = expand_value(flag, value, working_directory)
        i += 2

    return args
