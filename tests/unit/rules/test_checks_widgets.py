# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for CheckSmartWidgets."""

from __future__ import annotations

import textwrap

import pytest

from mrgate.models.model_merge_request import ModelFileChange, ModelMergeRequest
from mrgate.rules.base import CheckContext
from mrgate.rules.checks_widgets import CheckSmartWidgets
from mrgate.schemas.model_gate_policy import ModelGatePolicy

UI_PAGE = "lib/ui/home/home_page.dart"

# ---------------------------------------------------------------------------
# Test helpers
# ---------------------------------------------------------------------------


def make_context(
    files: dict[str, str],
    policy: ModelGatePolicy | None = None,
) -> CheckContext:
    return CheckContext(
        merge_request=ModelMergeRequest(title="feat: x"),
        commits=[],
        changed_files=[ModelFileChange(path=p) for p in files],
        policy=policy or ModelGatePolicy(),
        content_lookup=lambda path: files.get(path, ""),
    )


def listed(issues: list[str]) -> list[str]:
    return [issue for issue in issues if issue.startswith("  - ")]


PAGE_WITH_BASE_WIDGETS = textwrap.dedent("""\
    class HomePage extends StatelessWidget {
      Widget build(BuildContext context) {
        return Column(
          children: [
            Text('a'),
            SmartText('b'),
            // Row(
            widget.Text(
          ],
        );
      }
    }
""")


# ---------------------------------------------------------------------------
# Primary scan
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestBaseWidgetScan:
    def setup_method(self) -> None:
        self.check = CheckSmartWidgets()

    def test_flags_base_widgets(self) -> None:
        result = self.check.evaluate(make_context({UI_PAGE: PAGE_WITH_BASE_WIDGETS}))
        assert not result.passed
        assert listed(result.issues) == [
            f"  - `{UI_PAGE}:3` use SmartColumn instead of Column",
            f"  - `{UI_PAGE}:5` use SmartText instead of Text",
        ]
        assert "2 optimization(s) needed" in result.summary_line
        assert result.issues[0] == "📋 **Smart Widget Guidelines (20+ Widgets):**"

    def test_smart_widgets_pass(self) -> None:
        content = "return SmartColumn(children: [SmartText('a'), SmartRow()]);"
        result = self.check.evaluate(make_context({UI_PAGE: content}))
        assert result.passed
        assert "Properly used throughout" in result.summary_line

    def test_block_comment_skipped(self) -> None:
        content = "/*\n  Text('old'),\n*/\nSmartText('new'),"
        assert self.check.evaluate(make_context({UI_PAGE: content})).passed

    def test_inside_string_skipped(self) -> None:
        content = "final hint = 'Tap Row( to expand';"
        assert self.check.evaluate(make_context({UI_PAGE: content})).passed

    def test_longer_identifier_skipped(self) -> None:
        content = "RowSpacer(gap: 4), Row(children: items),"
        assert self.check.evaluate(make_context({UI_PAGE: content})).passed

    def test_helper_marker_skipped(self) -> None:
        content = "child: Text(LocaleKeys.title.tr),"
        assert self.check.evaluate(make_context({UI_PAGE: content})).passed

    def test_buttons_skipped_when_file_uses_smart_text_field(self) -> None:
        content = "SmartTextField(hint: h),\nElevatedButton(onPressed: submit),"
        assert self.check.evaluate(make_context({UI_PAGE: content})).passed

    def test_buttons_flagged_without_smart_text_field(self) -> None:
        content = "ElevatedButton(onPressed: submit),"
        result = self.check.evaluate(make_context({UI_PAGE: content}))
        assert listed(result.issues) == [
            f"  - `{UI_PAGE}:1` use SmartButton instead of ElevatedButton"
        ]

    def test_file_defining_wrapper_is_exempt(self) -> None:
        content = textwrap.dedent("""\
            class SmartText extends StatelessWidget {
              Widget build(BuildContext c) => Text(value);
            }
        """)
        files = {"lib/ui/common/fancy_text.dart": content}
        assert self.check.evaluate(make_context(files)).passed

    def test_image_constructors(self) -> None:
        content = "child: Image.asset('assets/logo.png'),"
        result = self.check.evaluate(make_context({UI_PAGE: content}))
        assert listed(result.issues) == [
            f"  - `{UI_PAGE}:1` use SmartImage instead of Image.asset"
        ]

    def test_gradient_container(self) -> None:
        content = "Container(decoration: BoxDecoration(gradient: g)),"
        result = self.check.evaluate(make_context({UI_PAGE: content}))
        assert listed(result.issues) == [
            f"  - `{UI_PAGE}:1` use SmartGradientContainer instead of Container with gradient"
        ]


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestEligibility:
    def setup_method(self) -> None:
        self.check = CheckSmartWidgets()

    @pytest.mark.parametrize(
        "path",
        [
            "lib/data/home_repository.dart",
            "lib/ui/widgets/smart_text.dart",
            "lib/ui/generated/screens.dart",
            "lib/ui/home/home_page.g.dart",
        ],
    )
    def test_ineligible_paths(self, path: str) -> None:
        result = self.check.evaluate(make_context({path: "Text('a')"}))
        assert result.passed
        assert result.files_checked == 0


# ---------------------------------------------------------------------------
# Wrapping scan
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestWrappingScan:
    def setup_method(self) -> None:
        self.check = CheckSmartWidgets()

    def test_container_wrapping_smart_row(self) -> None:
        content = textwrap.dedent("""\
            Container(
              padding: p,
              child: SmartRow(
                children: [],
              ),
            )
        """)
        result = self.check.evaluate(make_context({UI_PAGE: content}))
        assert listed(result.issues) == [
            f"  - `{UI_PAGE}:1` SmartRow already includes Container properties"
        ]

    def test_wrapping_cap(self) -> None:
        block = "Container(child: SmartColumn()),\n"
        policy = ModelGatePolicy(caps={"smart-widgets-wrapping": 3})
        result = self.check.evaluate(make_context({UI_PAGE: block * 6}, policy))
        assert len(listed(result.issues)) == 3


# ---------------------------------------------------------------------------
# Caps
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestCaps:
    def test_primary_cap_and_truncation(self) -> None:
        content = "\n".join("Text('x')," for _ in range(20))
        result = CheckSmartWidgets().evaluate(make_context({UI_PAGE: content}))
        assert "15 optimization(s) needed" in result.summary_line
        entries = listed(result.issues)
        assert len(entries) == 11
        assert entries[-1] == "  - ... and 5 more"

    def test_check_is_stateless_across_runs(self) -> None:
        check = CheckSmartWidgets()
        content = "\n".join("Container(child: SmartRow())," for _ in range(12))
        first = check.evaluate(make_context({UI_PAGE: content}))
        second = check.evaluate(make_context({UI_PAGE: content}))
        assert first == second
