# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Smart widget usage check.

The project mandates wrapper components (SmartText, SmartButton, ...) in
place of the Flutter primitives they wrap. The primary scan is line based
and reports direct uses of a primitive; the secondary scan runs over whole
file content and reports wrappers that are redundantly wrapped in a
Container, Padding or GestureDetector.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from mrgate.rules.base import CheckContext, FileScanCheck, ViolationCollector
from mrgate.rules.patterns import (
    BUTTON_WIDGETS,
    GRADIENT_PATTERNS,
    GRADIENT_WRAPPER,
    IMAGE_PATTERNS,
    IMAGE_WRAPPER,
    SMART_WIDGET_DEFINITION_MARKER,
    WIDGET_HELPER_MARKERS,
    WIDGET_REPLACEMENTS,
    WRAPPING_RULES,
    SuggestionRule,
)
from mrgate.rules.predicates import (
    is_comment_line,
    is_generated_file,
    is_inside_block_comment,
    is_inside_string_literal,
    is_member_or_identifier_suffix,
    is_source_file,
    is_ui_file,
    line_number_at,
)
from mrgate.schemas.model_gate_policy import ModelGatePolicy

_GUIDELINES: tuple[str, ...] = (
    "📋 **Smart Widget Guidelines (20+ Widgets):**",
    "",
    "🎯 **Core Layout (Critical):**",
    "- SmartText → Text | SmartRow → Row | SmartColumn → Column",
    "",
    "🎨 **UI Components (Critical):**",
    "- SmartButton → ElevatedButton/TextButton/OutlinedButton",
    "- SmartTextField → TextField/TextFormField",
    "- SmartCheckbox → Checkbox | SmartRadioButton → Radio",
    "- SmartDropDown → DropdownButton | SmartAppBar → AppBar",
    "- SmartTabBar → TabBar/TabBarView",
    "",
    "🖼️ **Media & Display (Critical):**",
    "- SmartImage → Image.asset/Image.network/CachedNetworkImage/SvgPicture",
    "- SmartCircularProgressIndicator → CircularProgressIndicator",
    "- SmartSingleChildScrollView → SingleChildScrollView",
    "",
    "🔧 **Utility Widgets (Important):**",
    "- SmartExpansionTile → ExpansionTile",
    "- SmartDashedDivider → Use for dashed/dotted dividers (not regular Divider)",
    "- SmartGradientContainer → Container with gradients",
    "",
    "🏗️ **Advanced Architecture:**",
    "- SmartViewBuilder → Available for loading/error/success states (optional)",
    "- SmartPaginatedViewBuilder → Available for pagination (optional)",
    "",
    "⚠️ **Optimization Rules:**",
    "- Avoid wrapping Smart Widgets with Container (they include Container properties)",
    "- Use Smart Widget properties: padding, margin, decoration, color, onTap, etc.",
    "- SmartTextField presence skips SmartButton validation (forms may not need buttons)",
)


class _SmartWidgetCollector(ViolationCollector):
    """Primary collector that also tracks the secondary wrapping cap."""

    def __init__(self, cap: int, wrapping_cap: int) -> None:
        super().__init__(cap)
        self.wrapping = ViolationCollector(wrapping_cap)


class CheckSmartWidgets(FileScanCheck):
    """UI files must use Smart wrapper widgets instead of base widgets."""

    check_id = "smart-widgets"
    name = "Smart Widgets"
    pass_text = "Properly used throughout"

    def __init__(
        self,
        replacements: Sequence[tuple[str, str]] = WIDGET_REPLACEMENTS,
        image_patterns: Sequence[str] = IMAGE_PATTERNS,
        gradient_patterns: Sequence[str] = GRADIENT_PATTERNS,
        wrapping_rules: Sequence[SuggestionRule] = WRAPPING_RULES,
        helper_markers: Sequence[str] = WIDGET_HELPER_MARKERS,
    ) -> None:
        self._replacements = [
            (old, new, re.compile(rf"\b{old}\s*\("), re.compile(rf"{old}\w+"))
            for old, new in replacements
        ]
        self._image_patterns = [re.compile(p) for p in image_patterns]
        self._gradient_patterns = [re.compile(p) for p in gradient_patterns]
        self._wrapping_rules = [
            (re.compile(rule.pattern, re.MULTILINE | re.DOTALL), rule.suggestion)
            for rule in wrapping_rules
        ]
        self._helper_markers = tuple(helper_markers)
        self._wrappers = {new for _, new in replacements} | {
            IMAGE_WRAPPER,
            GRADIENT_WRAPPER,
        }

    def is_eligible(self, path: str, policy: ModelGatePolicy) -> bool:
        return (
            is_source_file(path, policy.source_extension)
            and is_ui_file(path)
            and not is_generated_file(path)
            and SMART_WIDGET_DEFINITION_MARKER not in path
        )

    def defined_wrappers(self, content: str) -> set[str]:
        """Return the wrapper classes this file itself defines."""
        return {
            wrapper
            for wrapper in self._wrappers
            if re.search(rf"\bclass\s+{wrapper}\b", content)
        }

    def make_collector(self, policy: ModelGatePolicy) -> ViolationCollector:
        return _SmartWidgetCollector(
            policy.get_cap(self.check_id),
            policy.get_cap("smart-widgets-wrapping"),
        )

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        self._scan_base_widgets(path, content, collector)
        if isinstance(collector, _SmartWidgetCollector) and not collector.full:
            self._scan_wrapping(path, content, collector, collector.wrapping)

    def _is_base_widget_use(
        self,
        line: str,
        match: re.Match[str],
        content: str,
        offset: int,
    ) -> bool:
        if is_inside_string_literal(line, match.start()):
            return False
        if is_inside_block_comment(content, offset + match.start()):
            return False
        if is_member_or_identifier_suffix(line[: match.start()].strip()):
            return False
        return True

    def _scan_base_widgets(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
    ) -> None:
        defined = self.defined_wrappers(content)
        skip_buttons = "SmartTextField" in content
        offset = 0

        for line_num, line in enumerate(content.split("\n"), start=1):
            line_offset = offset
            offset += len(line) + 1
            if is_comment_line(line):
                continue

            for old, new, pattern, longer_name in self._replacements:
                if new in defined or new in line:
                    continue
                if skip_buttons and old in BUTTON_WIDGETS:
                    continue
                match = pattern.search(line)
                if match is None:
                    continue
                if not self._is_base_widget_use(line, match, content, line_offset):
                    continue
                if any(marker in line for marker in self._helper_markers):
                    continue
                if longer_name.search(line):
                    continue
                if collector.add(f"  - `{path}:{line_num}` use {new} instead of {old}"):
                    return

            if IMAGE_WRAPPER not in defined and IMAGE_WRAPPER not in line:
                for pattern in self._image_patterns:
                    match = pattern.search(line)
                    if match is None or is_inside_string_literal(line, match.start()):
                        continue
                    widget = match.group(0).rstrip("(").strip()
                    if collector.add(
                        f"  - `{path}:{line_num}` use {IMAGE_WRAPPER} instead of {widget}"
                    ):
                        return

            if GRADIENT_WRAPPER not in defined and GRADIENT_WRAPPER not in line:
                for pattern in self._gradient_patterns:
                    if pattern.search(line) is None:
                        continue
                    if collector.add(
                        f"  - `{path}:{line_num}` use {GRADIENT_WRAPPER} "
                        "instead of Container with gradient"
                    ):
                        return

    def _scan_wrapping(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        wrapping: ViolationCollector,
    ) -> None:
        for pattern, suggestion in self._wrapping_rules:
            for match in pattern.finditer(content):
                if wrapping.full or collector.full:
                    return
                line_num = line_number_at(content, match.start())
                entry = f"  - `{path}:{line_num}` {suggestion}"
                wrapping.add(entry)
                collector.add(entry)

    def fail_text(self, count: int) -> str:
        return f"{count} optimization(s) needed"

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return list(_GUIDELINES)


__all__ = ["CheckSmartWidgets"]
