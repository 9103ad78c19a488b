"""Escape-aware splitting helpers for the synonym rule format.

A backslash protects the following character from being read as a
delimiter. The scanner keeps the backslash in its output so that
:func:`unescape` can remove it once the term boundaries are known.
"""

from __future__ import annotations

from typing import List

__all__ = ["ESCAPE_CHAR", "split_escaped", "unescape"]

ESCAPE_CHAR = "\\"


def split_escaped(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on unescaped occurrences of ``delimiter``.

    Empty segments are dropped, so consecutive delimiters or an empty input
    never produce zero-length strings. A trailing escape character is kept
    as-is.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    segments: List[str] = []
    current: List[str] = []
    pos = 0
    end = len(text)
    step = len(delimiter)

    while pos < end:
        if text.startswith(delimiter, pos):
            if current:
                segments.append("".join(current))
                current = []
            pos += step
            continue

        ch = text[pos]
        pos += 1
        if ch == ESCAPE_CHAR:
            current.append(ch)
            if pos >= end:
                break
            ch = text[pos]
            pos += 1
        current.append(ch)

    if current:
        segments.append("".join(current))
    return segments


def unescape(text: str) -> str:
    """Return ``text`` with one backslash removed before each escaped char."""
    if ESCAPE_CHAR not in text:
        return text

    chars: List[str] = []
    i = 0
    last = len(text) - 1
    while i <= last:
        ch = text[i]
        if ch == ESCAPE_CHAR and i < last:
            i += 1
            ch = text[i]
        chars.append(ch)
        i += 1
    return "".join(chars)
