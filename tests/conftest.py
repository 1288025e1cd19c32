"""Shared pytest fixtures for statcodec tests.

Fixtures are organized by category:
- Path fixtures: Sample inputs on disk
- Statistics fixtures: Pre-built LanguageMap values
- Capability fixtures: Capability sets and dispatchers for fixed flag sets
"""

from pathlib import Path

import pytest

from statcodec.codecs import reset_registry
from statcodec.dispatcher import FormatDispatcher
from statcodec.models import FileReport, Language, LanguageMap
from tests.fixtures import SAMPLES_DIR
from tests.fixtures.codecs import make_capabilities

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def samples_dir() -> Path:
    """Return the path to the sample inputs directory."""
    return SAMPLES_DIR


# =============================================================================
# Statistics Fixtures
# =============================================================================


@pytest.fixture
def sample_languages() -> LanguageMap:
    """Return a two-language map with per-file reports."""
    return LanguageMap(
        {
            "Rust": Language(
                blanks=4,
                code=120,
                comments=12,
                reports=[FileReport("src/main.rs", blanks=4, code=120, comments=12)],
            ),
            "C++": Language(
                blanks=2,
                code=40,
                comments=5,
                reports=[
                    FileReport("a.cpp", blanks=1, code=25, comments=3),
                    FileReport("b.cpp", blanks=1, code=15, comments=2),
                ],
                inaccurate=True,
            ),
        }
    )


# =============================================================================
# Capability Fixtures
# =============================================================================


@pytest.fixture
def json_yaml_dispatcher() -> FormatDispatcher:
    """Return a dispatcher where only JSON and YAML are enabled."""
    return FormatDispatcher(make_capabilities("json", "yaml"))


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Give every test a freshly built global registry."""
    reset_registry()
    yield
    reset_registry()
