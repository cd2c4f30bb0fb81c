import re
import shlex
from typing import List, Sequence, Union

from .errors import InvalidCommandError, TokenizeError

# короткие флаги со значением, которое можно приклеить: -XPUT -> -X PUT
SHORT_VALUE_FLAGS = ("-A", "-H", "-d", "-u", "-X", "-b")
# все флаги, за которыми идет значение отдельным токеном
VALUE_FLAGS = SHORT_VALUE_FLAGS + (
    "--user-agent",
    "--header",
    "--data",
    "--data-ascii",
    "--data-raw",
    "--data-binary",
    "--data-urlencode",
    "--user",
    "--request",
    "--cookie",
)

_LINE_CONTINUATION = re.compile(r"\\\r?\n")


def join_continuations(curl_cmd: str) -> str:
    """Drop backslash-newline outside single quotes, the way a shell does."""
    out = []
    quote = None
    i = 0
    while i < len(curl_cmd):
        ch = curl_cmd[i]
        if quote == "'":
            if ch == "'":
                quote = None
        elif ch == "\\":
            m = _LINE_CONTINUATION.match(curl_cmd, i)
            if m:
                # без кавычек перенос разделяет слова, внутри "..." просто исчезает
                out.append(" " if quote is None else "")
                i = m.end()
            else:
                out.append(curl_cmd[i:i + 2])
                i += 2
            continue
        elif ch in "'\"":
            if quote is None:
                quote = ch
            elif quote == ch:
                quote = None
        out.append(ch)
        i += 1
    return "".join(out)


def split_command(curl_cmd: str) -> List[str]:
    # shlex не знает про перенос строки через "\"
    curl_cmd = join_continuations(curl_cmd)
    try:
        return shlex.split(curl_cmd, posix=True)
    except ValueError as e:
        raise TokenizeError(f"cannot split curl command: {e}") from e


def rewrite_glued(args: Sequence[str]) -> List[str]:
    rw = []
    expect_value = False
    for a in args:
        # значение предыдущего флага не трогаем, даже если оно похоже на -Hxxx
        if not expect_value and len(a) > 2 and a[:2] in SHORT_VALUE_FLAGS:
            rw.append(a[:2])
            rw.append(a[2:])
        else:
            rw.append(a)
            expect_value = not expect_value and a in VALUE_FLAGS
    return rw


def tokenize(cmd: Union[str, Sequence[str]]) -> List[str]:
    """
    Turn a curl command into the argument list after "curl".

    A string is split shell-style; a list or tuple is taken as already split.
    Glued short options (-XPOST, -d@file) come back as two tokens.
    """
    tokens = split_command(cmd) if isinstance(cmd, str) else list(cmd)
    if not tokens or tokens[0] != "curl":
        raise InvalidCommandError(f"invalid curl command: {cmd!r}")
    if len(tokens) < 2:
        raise InvalidCommandError(f"invalid curl command: {cmd!r}")
    return rewrite_glued(tokens[1:])
