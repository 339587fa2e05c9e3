# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for ModelGatePolicy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mrgate.models.model_check_severity import CheckSeverity
from mrgate.schemas.model_gate_policy import (
    CHECK_IDS,
    DEFAULT_CAPS,
    DEFAULT_SEVERITIES,
    ModelGatePolicy,
)


@pytest.mark.unit
class TestDefaults:
    def test_every_check_has_a_default_severity(self) -> None:
        assert set(DEFAULT_SEVERITIES) == set(CHECK_IDS)

    def test_default_severity_mapping(self) -> None:
        policy = ModelGatePolicy()
        critical = {
            check_id
            for check_id in CHECK_IDS
            if policy.get_severity(check_id) == CheckSeverity.CRITICAL
        }
        assert critical == {
            "wip-commits",
            "sensitive-files",
            "secrets",
            "screenutil",
            "smart-widgets",
        }
        assert policy.get_severity("file-naming") == CheckSeverity.WARNING
        assert policy.get_severity("todo-comments") == CheckSeverity.INFO

    def test_default_caps(self) -> None:
        policy = ModelGatePolicy()
        assert policy.get_cap("hardcoded-strings") == 15
        assert policy.get_cap("print-statements") == 10
        assert policy.get_cap("smart-widgets-wrapping") == 10

    def test_all_checks_enabled(self) -> None:
        policy = ModelGatePolicy()
        assert all(policy.is_enabled(check_id) for check_id in CHECK_IDS)

    def test_default_limits(self) -> None:
        limits = ModelGatePolicy().limits
        assert limits.listed_violations == 10
        assert limits.listed_commits == 5
        assert limits.details_per_check == 5


@pytest.mark.unit
class TestOverrides:
    def test_partial_severities_merged_over_defaults(self) -> None:
        policy = ModelGatePolicy(severities={"screenutil": "warning"})
        assert policy.get_severity("screenutil") == CheckSeverity.WARNING
        assert policy.get_severity("secrets") == CheckSeverity.CRITICAL

    def test_partial_caps_merged_over_defaults(self) -> None:
        policy = ModelGatePolicy(caps={"print-statements": 3})
        assert policy.get_cap("print-statements") == 3
        assert policy.get_cap("secrets") == DEFAULT_CAPS["secrets"]

    def test_disabled_check(self) -> None:
        policy = ModelGatePolicy(disabled_checks=["smart-widgets"])
        assert policy.is_enabled("smart-widgets") is False
        assert policy.is_enabled("screenutil") is True

    def test_extension_normalised(self) -> None:
        assert ModelGatePolicy(source_extension="dart").source_extension == ".dart"


@pytest.mark.unit
class TestValidation:
    def test_unknown_check_id_in_severities(self) -> None:
        with pytest.raises(ValidationError, match="unknown check IDs"):
            ModelGatePolicy(severities={"no-such-check": "info"})

    def test_unknown_check_id_in_disabled(self) -> None:
        with pytest.raises(ValidationError, match="unknown check IDs"):
            ModelGatePolicy(disabled_checks=["nope"])

    def test_invalid_severity(self) -> None:
        with pytest.raises(ValidationError):
            ModelGatePolicy(severities={"secrets": "fatal"})

    def test_non_positive_cap(self) -> None:
        with pytest.raises(ValidationError, match="caps must be >= 1"):
            ModelGatePolicy(caps={"secrets": 0})

    def test_invalid_sensitive_pattern(self) -> None:
        with pytest.raises(ValidationError, match="not a valid regex"):
            ModelGatePolicy(sensitive_patterns=["(unclosed"])

    def test_invalid_version(self) -> None:
        with pytest.raises(ValidationError, match="semver"):
            ModelGatePolicy(version="v1")


@pytest.mark.unit
class TestConventionalPattern:
    def setup_method(self) -> None:
        self.pattern = ModelGatePolicy().conventional_pattern

    @pytest.mark.parametrize(
        "title",
        [
            "feat: add login",
            "fix(auth): handle expired token",
            "FEAT: shouting is fine",
            "chore(deps): bump flutter",
        ],
    )
    def test_accepts(self, title: str) -> None:
        assert self.pattern.match(title)

    @pytest.mark.parametrize(
        "title",
        [
            "Add login",
            "feat:missing space",
            "feature: not a type",
            "feat(): empty scope",
            "feat: ",
        ],
    )
    def test_rejects(self, title: str) -> None:
        assert self.pattern.match(title) is None
