"""Terminal text utilities: printable checks, width measurement, trimming.

The writer keeps its own reflection of what is on screen, so the width it
assigns to each character has to agree with the terminal's idea of it
(wcwidth).  Everything that measures or cuts text for the screen goes through
this module.
"""

from __future__ import annotations

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Single characters
# ---------------------------------------------------------------------------


def is_printable(char: str) -> bool:
    """Return ``True`` if *char* can be placed on the screen.

    Letters, marks, numbers, punctuation, symbols and the ASCII space are
    printable; control, format and non-space separator characters are not.
    """
    return char.isprintable()


def char_width(char: str) -> int:
    """Return the number of terminal columns taken by a single code point.

    Control characters and combining marks take 0 columns, East Asian wide
    and fullwidth characters take 2, everything else takes 1.
    """
    cp = ord(char)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    if cp < 0x7F:
        return 1
    w = _wcwidth.wcwidth(char)
    return max(w, 0)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def visible_width(text: str) -> int:
    """Calculate the number of columns *text* occupies when written cell by cell.

    This is the sum of :func:`char_width` over the printable characters of
    *text*, which is exactly how :class:`termline.buffer.Buffer` accounts for
    it.  Uses a fast ASCII path and caches results for other strings.
    """
    if not text:
        return 0

    if text.isascii() and text.isprintable():
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = 0
    for ch in text:
        if is_printable(ch):
            total += char_width(ch)

    return _cache_width(text, total)


def trim_to_width(text: str, max_width: int) -> str:
    """Return the longest prefix of *text* that fits in *max_width* columns.

    Works on grapheme clusters so a base character is never separated from its
    combining marks, and never splits a double-width character: if the next
    cluster does not fit it is left out entirely.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    used = 0
    parts: list[str] = []
    for g in grapheme.graphemes(text):
        w = visible_width(g)
        if used + w > max_width:
            break
        parts.append(g)
        used += w
    return "".join(parts)


def utf8_len(char: str) -> int:
    """Number of bytes *char* takes in UTF-8."""
    cp = ord(char)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def byte_slice(text: str, start: int, end: int) -> str:
    """Slice *text* by UTF-8 byte offsets ``[start, end)``.

    Offsets that fall inside a multi-byte sequence are rounded away by the
    decoder rather than producing replacement characters.
    """
    return text.encode("utf-8")[start:end].decode("utf-8", errors="ignore")

