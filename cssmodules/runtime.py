"""Names shared with the bundler runtime."""

from __future__ import annotations

import re

REQUIRE_HELPER = "__webpack_require__"

AUTO_PUBLIC_PATH_PLACEHOLDER = "__CSSMODULES_AUTO_PUBLIC_PATH__"
AUTO_PUBLIC_PATH_PLACEHOLDER_PATTERN = re.compile(re.escape(AUTO_PUBLIC_PATH_PLACEHOLDER))


def replace_auto_public_path(source: str, public_path: str) -> str:
    """Swap every auto public path placeholder in emitted CSS for ``public_path``."""
    return AUTO_PUBLIC_PATH_PLACEHOLDER_PATTERN.sub(lambda _: public_path, source)


__all__ = [
    "AUTO_PUBLIC_PATH_PLACEHOLDER",
    "AUTO_PUBLIC_PATH_PLACEHOLDER_PATTERN",
    "REQUIRE_HELPER",
    "replace_auto_public_path",
]
