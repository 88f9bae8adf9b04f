"""Normalization of raw ``url()`` payloads found in CSS."""

from __future__ import annotations

import re
from urllib.parse import unquote

_CSS_WHITESPACE = " \t\n\r\f"

_LINE_CONTINUATION = re.compile(r"\\[\n\r\f]")
_ESCAPE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n\r\f]?|([\s\S]))")
_DATA_URI = re.compile(r"^data:", re.IGNORECASE)

_MAX_CODE_POINT = 0x10FFFF


def _unescape(match: re.Match[str]) -> str:
    hex_digits, literal = match.group(1), match.group(2)
    if literal is not None:
        # Only ASCII characters decode literally; anything wider stays escaped.
        return literal if literal.isascii() else match.group(0)
    code_point = int(hex_digits, 16)
    if code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return match.group(0)
    return chr(code_point)


def unescape_css(value: str) -> str:
    """Decode CSS backslash escapes; invalid code points are kept as written."""
    return _ESCAPE.sub(_unescape, value)


def normalize_url(raw: str) -> str:
    """Return the resolvable form of a CSS url token payload.

    Line continuations are dropped, surrounding whitespace trimmed and escapes
    decoded. ``data:`` URIs are returned at that point; anything else holding
    a ``%`` is percent-decoded when the result is valid UTF-8.
    """
    result = _LINE_CONTINUATION.sub("", raw)
    result = result.strip(_CSS_WHITESPACE)
    result = unescape_css(result)

    if _DATA_URI.match(result):
        return result
    if "%" in result:
        try:
            return unquote(result, errors="strict")
        except UnicodeDecodeError:
            return result
    return result


__all__ = ["normalize_url", "unescape_css"]
