from __future__ import annotations

import pytest

from cssmodules.graph import StaticModuleGraph
from cssmodules.models import IdentityContext


@pytest.fixture
def graph() -> StaticModuleGraph:
    """Two stylesheets where ``app.css`` composes from ``./other.css``."""
    return StaticModuleGraph.from_payload(
        {
            "src/app.css": {
                "id": "./src/app.css",
                "dependencies": [
                    {"request": "./reset.css", "module": "src/reset.css"},
                    {"request": "./other.css", "module": "src/other.css"},
                ],
            },
            "src/reset.css": {"id": "./src/reset.css"},
            "src/other.css": {"id": "./src/other.css"},
        }
    )


@pytest.fixture
def identity_context() -> IdentityContext:
    return IdentityContext(filename="src/components/button.css")
