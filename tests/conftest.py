"""Shared pytest fixtures for plugdoc tests.

Fixtures are organized by category:
- Template fixtures: Small documents exercising each node kind
- Configuration fixtures: Config dictionaries for various scenarios
"""

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from plugdoc.composer import VariantComposer
from plugdoc.models import Document, Mode
from plugdoc.models.nodes import b, document, li, mono, p, stereo, ul


@pytest.fixture(autouse=True)
def reset_plugdoc_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they never outlive their streams."""
    yield
    logger = logging.getLogger("plugdoc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Template Fixtures
# =============================================================================


@pytest.fixture
def composer() -> VariantComposer:
    """Return a fresh composer."""
    return VariantComposer()


@pytest.fixture
def three_item_list() -> Document:
    """A list with one unconditional, one mono-only and one stereo-only item."""
    return document(
        ul(
            li("always"),
            mono(li("mono only")),
            stereo(li("stereo only")),
        )
    )


@pytest.fixture
def tagged_document() -> Document:
    """A document with uniquely tagged content for each mode and nesting level."""
    return document(
        p("intro ", mono("[block-m]"), stereo("[block-s]"), " end"),
        stereo(p(b("Correlation"), " and spectral correlation between channels.")),
        ul(
            li("first"),
            mono(li("[item-m]")),
            li(
                "nested",
                ul(
                    stereo(li("[nested-s]")),
                    li("last"),
                ),
            ),
        ),
        mono(p("[section-m]")),
        name="tagged",
    )


@pytest.fixture
def all_modes() -> list[Mode]:
    return list(Mode)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid plugdoc configuration."""
    return {
        "output": {
            "directory": "site/manuals",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete plugdoc configuration with all options."""
    return {
        "output": {
            "directory": "site/manuals",
            "filename": "{page}.php.html",
            "wrap_page": False,
        },
        "page": {
            "site_title": "Plugins",
            "show_identifiers": False,
        },
        "manual": "referencer",
        "modes": ["stereo"],
    }
