"""ANSI text utilities - measuring and truncating strings with escape codes."""

from __future__ import annotations

import re

_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(_ANSI_ESCAPE.sub('', s))


def truncate(s: str, max_width: int) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Escape codes are kept whole and a reset is appended when anything was
    cut, so no color bleeds past the end.
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    i = 0

    while i < len(s) and vis_len < max_width:
        match = _ANSI_ESCAPE.match(s, i)
        if match:
            result.append(match.group())
            i = match.end()
        else:
            result.append(s[i])
            vis_len += 1
            i += 1

    output = ''.join(result)
    if i < len(s):
        output += '\x1b[0m'
    return output
