# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Checks that scan the content of changed source files.

Each check receives its pattern table at construction time; the defaults
come from :mod:`mrgate.rules.patterns`.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from mrgate.rules.base import CheckContext, FileScanCheck, ViolationCollector
from mrgate.rules.patterns import (
    DYNAMIC_COMMENT_PATTERNS,
    HARDCODED_STRING_PATTERNS,
    PRINT_PATTERNS,
    SCREENUTIL_RULES,
    SECRET_ALLOW_LIST,
    SECRET_PATTERNS,
    TODO_WITHOUT_TICKET,
    SecretPattern,
    SuggestionRule,
)
from mrgate.rules.predicates import (
    has_declaration_keyword,
    has_dynamic_comment,
    has_string_interpolation,
    is_escape_only_literal,
    is_generated_file,
    is_inside_string_literal,
    is_rich_text_line,
    is_secret_false_positive,
    is_source_file,
    is_test_file,
    is_ui_file,
    line_at,
    line_number_at,
)
from mrgate.schemas.model_gate_policy import ModelGatePolicy


class CheckHardcodedStrings(FileScanCheck):
    """User-facing strings in the UI layer must come from LocaleKeys."""

    check_id = "hardcoded-strings"
    name = "Hardcoded Strings"

    def __init__(
        self,
        patterns: Sequence[str] = HARDCODED_STRING_PATTERNS,
        dynamic_comment_patterns: Sequence[str] = DYNAMIC_COMMENT_PATTERNS,
    ) -> None:
        self._patterns = [re.compile(p) for p in patterns]
        self._dynamic_comment_patterns = tuple(dynamic_comment_patterns)

    def is_eligible(self, path: str, policy: ModelGatePolicy) -> bool:
        return is_source_file(path, policy.source_extension) and is_ui_file(path)

    def is_excluded(self, lines: Sequence[str], index: int) -> bool:
        """Return True if the literal on ``lines[index]`` is allowed."""
        line = lines[index] if index < len(lines) else ""
        return (
            is_rich_text_line(line)
            or has_string_interpolation(line)
            or is_escape_only_literal(line)
            or has_dynamic_comment(lines, index, self._dynamic_comment_patterns)
        )

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        lines = content.split("\n")
        for pattern in self._patterns:
            for match in pattern.finditer(content):
                line_num = line_number_at(content, match.start())
                if self.is_excluded(lines, line_num - 1):
                    continue
                if collector.add(f"  - `{path}:{line_num}` has hardcoded string"):
                    return

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return [
            "Use LocaleKeys for all user-facing strings",
            "Example: `LocaleKeys.welcome.tr` instead of `'Welcome'`",
            "Note: String interpolations with variables or LocaleKeys are allowed",
            "Allowed: `'${item.name}'`, `'${LocaleKeys.price.tr}: ${item.price}'`",
            "Note: Strings with dynamic comments are excluded "
            "(e.g., `'Black', // can make dynamic`)",
        ]


class CheckPrintStatements(FileScanCheck):
    """Debug prints must not be merged."""

    check_id = "print-statements"
    name = "Print Statements"

    def __init__(self, patterns: Sequence[str] = PRINT_PATTERNS) -> None:
        self._patterns = [re.compile(p) for p in patterns]

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        for pattern in self._patterns:
            for match in pattern.finditer(content):
                line_num = line_number_at(content, match.start())
                if collector.add(f"  - `{path}:{line_num}` contains print()"):
                    return

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return ["Remove print() statements or replace with debugPrint()"]


class CheckTodoComments(FileScanCheck):
    """TODO comments must reference a ticket (e.g. ``// TODO: TENT-123``)."""

    check_id = "todo-comments"
    name = "TODO Comments"
    pass_text = "All have ticket references"
    fail_icon = "⚠️ "

    def __init__(self, pattern: str = TODO_WITHOUT_TICKET) -> None:
        self._pattern = re.compile(pattern, re.IGNORECASE)

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        for match in self._pattern.finditer(content):
            line_num = line_number_at(content, match.start())
            if collector.add(f"  - `{path}:{line_num}` has TODO without ticket"):
                return

    def fail_text(self, count: int) -> str:
        return f"{count} without ticket"

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return ["TODO comments must reference a ticket: `// TODO: TENT-123 - description`"]


class CheckScreenUtil(FileScanCheck):
    """Layout dimensions must use flutter_screenutil extensions.

    Heights use ``.h``, widths ``.w``, font sizes ``.sp`` and radii ``.r``.
    Zero literals are exempt and generated files are skipped.
    """

    check_id = "screenutil"
    name = "Flutter ScreenUtil"

    def __init__(self, rules: Sequence[SuggestionRule] = SCREENUTIL_RULES) -> None:
        self._rules = [(re.compile(rule.pattern), rule.suggestion) for rule in rules]

    def is_eligible(self, path: str, policy: ModelGatePolicy) -> bool:
        return is_source_file(path, policy.source_extension) and not is_generated_file(path)

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        for pattern, suggestion in self._rules:
            for match in pattern.finditer(content):
                line_num = line_number_at(content, match.start())
                if collector.add(f"  - `{path}:{line_num}` {match.expand(suggestion)}"):
                    return

    def pass_message(self, policy: ModelGatePolicy) -> str:
        return f"All patterns follow {policy.project_label} conventions"

    def fail_text(self, count: int) -> str:
        return f"{count} violation(s)"

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return [
            f"{policy.project_label} flutter_screenutil rules:",
            "- Height: .h | Width: .w | Font Size: .sp | Radius: .r",
            "- Padding: left/right/horizontal → .w | top/bottom/vertical → .h",
            "- Note: 0 values don't need extensions (0.w, 0.h, 0.sp, 0.r are not required)",
            "Examples: 50.w, 100.h, 16.sp, 10.r, EdgeInsets.all(8.w), "
            "EdgeInsets.symmetric(horizontal: 12.w, vertical: 8.h)",
        ]


class CheckSecrets(FileScanCheck):
    """Source files must not contain API keys, passwords or tokens."""

    check_id = "secrets"
    name = "API Keys/Secrets"
    pass_text = "None detected"

    def __init__(
        self,
        patterns: Sequence[SecretPattern] = SECRET_PATTERNS,
        allow_list: Sequence[str] = SECRET_ALLOW_LIST,
    ) -> None:
        self._patterns = [
            (re.compile(p.pattern, re.IGNORECASE), p.label, p.assignment)
            for p in patterns
        ]
        self._allow_list = tuple(allow_list)

    def is_eligible(self, path: str, policy: ModelGatePolicy) -> bool:
        return (
            is_source_file(path, policy.source_extension)
            and not is_test_file(path)
            and not is_generated_file(path)
        )

    def is_excluded(self, content: str, match: re.Match[str], assignment: bool) -> bool:
        """Return True if a secret-shaped match is a known false positive."""
        if is_secret_false_positive(match.group(0), self._allow_list):
            return True
        line = line_at(content, match.start())
        if has_declaration_keyword(line):
            return True
        if assignment:
            column = match.start() - (content.rfind("\n", 0, match.start()) + 1)
            return is_inside_string_literal(line, column)
        return False

    def scan_file(
        self,
        path: str,
        content: str,
        collector: ViolationCollector,
        context: CheckContext,
    ) -> None:
        for pattern, label, assignment in self._patterns:
            for match in pattern.finditer(content):
                if self.is_excluded(content, match, assignment):
                    continue
                line_num = line_number_at(content, match.start())
                if collector.add(f"  - `{path}:{line_num}` potential {label}"):
                    return

    def fail_text(self, count: int) -> str:
        return f"{count} potential leak(s)"

    def recommendations(self, policy: ModelGatePolicy) -> list[str]:
        return [
            "Never commit API keys or secrets to the repository",
            "Use environment variables or Firebase Remote Config",
        ]


__all__ = [
    "CheckHardcodedStrings",
    "CheckPrintStatements",
    "CheckScreenUtil",
    "CheckSecrets",
    "CheckTodoComments",
]
