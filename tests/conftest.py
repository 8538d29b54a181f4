"""Pytest configuration for the tscatalog test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared catalog fixtures are excerpts of a real Italian Bitcoin GUI catalog.
"""

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.catalogs import IT_CATALOG
from tscatalog import CatalogHandle, load
from tscatalog.runtime.plural_rules import _cldr_rule, _custom, _custom_lock

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# CATALOG FIXTURES
# =============================================================================


@pytest.fixture
def it_document() -> str:
    """Italian catalog excerpt as document text."""
    return IT_CATALOG


@pytest.fixture
def it_handle() -> CatalogHandle:
    """Handle with the Italian catalog excerpt loaded."""
    return load(IT_CATALOG)


@pytest.fixture
def clean_plural_registry():
    """Drop runtime-registered plural rules after the test."""
    yield
    with _custom_lock:
        _custom.clear()
    _cldr_rule.cache_clear()
