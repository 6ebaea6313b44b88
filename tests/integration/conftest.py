from __future__ import annotations

import os

import pytest


@pytest.fixture(scope="session")
def require_ekispert() -> str:
    """API key for live Ekispert calls; skips unless one is configured."""

    api_key = (os.getenv("EKISPERT_API_KEY") or "").strip()
    if not api_key:
        msg = "EKISPERT_API_KEY not set"

        # A CI job that opts in must not silently skip.
        if os.getenv("REQUIRE_EKISPERT"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return api_key
