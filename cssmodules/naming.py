"""Key transforms for exported class names."""

from __future__ import annotations

import re
from typing import List, Optional

_SEPARATORS = re.compile(r"[\W_]+")


def split_words(value: str) -> List[str]:
    """Split ``value`` on separators and case boundaries (``fooBar`` -> foo, Bar).

    Digits and other uncased characters take the case of what precedes them,
    so ``h1Title`` splits into ``h1`` and ``Title``.
    """
    words: List[str] = []
    for chunk in _SEPARATORS.split(value):
        if not chunk:
            continue
        start = 0
        mode: Optional[str] = None
        for index, char in enumerate(chunk[:-1]):
            following = chunk[index + 1]
            if char.islower():
                next_mode = "lower"
            elif char.isupper():
                next_mode = "upper"
            else:
                next_mode = mode
            if next_mode == "lower" and following.isupper():
                words.append(chunk[start : index + 1])
                start = index + 1
                mode = None
            elif mode == "upper" and char.isupper() and following.islower():
                # ``HTMLParser``: the last capital starts the next word.
                words.append(chunk[start:index])
                start = index
                mode = None
            else:
                mode = next_mode
        words.append(chunk[start:])
    return words


def to_lower_camel_case(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def to_kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


__all__ = ["split_words", "to_kebab_case", "to_lower_camel_case"]
