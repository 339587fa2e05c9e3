# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for MrGateSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mrgate.gitlab.client_gitlab import DEFAULT_API_URL
from mrgate.settings import MrGateSettings


@pytest.mark.unit
class TestMrGateSettings:
    def test_defaults(self) -> None:
        settings = MrGateSettings()
        assert settings.api_url == DEFAULT_API_URL
        assert settings.project_label is None
        assert settings.deadline_seconds is None
        assert settings.log_level == "INFO"
        assert settings.missing_required() == [
            "CI_PROJECT_ID",
            "CI_MERGE_REQUEST_IID",
            "GITLAB_TOKEN",
        ]

    def test_reads_ci_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI_API_V4_URL", "https://gitlab.example.com/api/v4")
        monkeypatch.setenv("CI_PROJECT_ID", "123")
        monkeypatch.setenv("CI_MERGE_REQUEST_IID", "42")
        monkeypatch.setenv("GITLAB_TOKEN", "glpat-secret")
        monkeypatch.setenv("MRGATE_DEADLINE_SECONDS", "90")
        settings = MrGateSettings()
        assert settings.api_url == "https://gitlab.example.com/api/v4"
        assert settings.project_id == "123"
        assert settings.mr_iid == "42"
        assert settings.deadline_seconds == 90.0
        assert settings.missing_required() == []
        assert all(present for _, present in settings.required_status())

    def test_token_not_in_repr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITLAB_TOKEN", "glpat-secret")
        assert "glpat-secret" not in repr(MrGateSettings())

    def test_empty_optional_variables_are_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MRGATE_PROJECT_LABEL", "")
        monkeypatch.setenv("MRGATE_POLICY_PATH", "")
        monkeypatch.setenv("MRGATE_DEADLINE_SECONDS", "")
        settings = MrGateSettings()
        assert settings.project_label is None
        assert settings.policy_path is None
        assert settings.deadline_seconds is None

    def test_non_positive_deadline_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MRGATE_DEADLINE_SECONDS", "0")
        with pytest.raises(ValidationError):
            MrGateSettings()

    def test_partial_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI_PROJECT_ID", "123")
        settings = MrGateSettings()
        assert settings.required_status() == [
            ("CI_PROJECT_ID", True),
            ("CI_MERGE_REQUEST_IID", False),
            ("GITLAB_TOKEN", False),
        ]
