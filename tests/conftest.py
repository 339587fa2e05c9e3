"""
Pytest configuration and fixtures for mrgate tests.

Tests run inside GitLab CI themselves, so every test starts with the CI
variables that mrgate reads removed from the environment.
"""

import pytest

from mrgate.schemas.model_gate_policy import ModelGatePolicy

# =========================================================================
# Environment
# =========================================================================

MRGATE_ENV_VARS = (
    "CI_API_V4_URL",
    "CI_PROJECT_ID",
    "CI_MERGE_REQUEST_IID",
    "GITLAB_TOKEN",
    "MRGATE_PROJECT_LABEL",
    "MRGATE_POLICY_PATH",
    "MRGATE_DEADLINE_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_mrgate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CI variables so settings only see what a test sets."""
    for name in MRGATE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# =========================================================================
# Policies
# =========================================================================


@pytest.fixture
def default_policy() -> ModelGatePolicy:
    """Built-in policy."""
    return ModelGatePolicy()
