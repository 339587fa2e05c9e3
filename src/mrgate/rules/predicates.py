# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Named heuristics shared by the quality gate checks.

Each false-positive exclusion lives in its own predicate so that it can be
unit tested on its own. Path predicates take repository-relative paths;
line predicates take a single line of source text.

Note:
    ``is_inside_string_literal`` is a quote-parity heuristic. It does not
    understand escaped quotes or multi-line strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from mrgate.rules.patterns import (
    DYNAMIC_COMMENT_PATTERNS,
    GENERATED_MARKERS,
    TEST_MARKERS,
    UI_SEGMENT,
)

_IDENTIFIER_SUFFIX = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*$")
_DECLARATION = re.compile(r"\b(const|static|final)\s+", re.IGNORECASE)
_RICH_TEXT = re.compile(r"Text\.rich\s*\(|RichText\s*\(")
_BRACED_INTERPOLATION = re.compile(r"\$\{[^}]+\}")
_ESCAPED_DOLLAR = re.compile(r"\\\$")
_ESCAPE_ONLY_LITERAL = re.compile(r"[\"']\s*\\[nrt]\s*[\"']")

# Keywords that may precede a constructor call without making it a member
# access or a longer identifier.
_CONSTRUCTOR_KEYWORDS = frozenset(
    {"return", "const", "new", "final", "var", "await", "yield", "else", "case"}
)

# ---------------------------------------------------------------------------
# Path predicates
# ---------------------------------------------------------------------------


def is_source_file(path: str, extension: str) -> bool:
    return path.endswith(extension)


def is_ui_file(path: str) -> bool:
    """Return True for files in the UI layer (a ``/ui/`` path segment)."""
    return UI_SEGMENT in path


def is_generated_file(path: str) -> bool:
    return any(marker in path for marker in GENERATED_MARKERS)


def is_test_file(path: str) -> bool:
    return any(marker in path for marker in TEST_MARKERS)


def has_folder_segment(path: str, folder: str) -> bool:
    """Return True if ``folder`` appears as a directory segment of ``path``."""
    return f"/{folder}/" in path


# ---------------------------------------------------------------------------
# Offsets and lines
# ---------------------------------------------------------------------------


def line_number_at(content: str, offset: int) -> int:
    """Return the 1-based line number of ``offset`` in ``content``."""
    return content.count("\n", 0, offset) + 1


def line_at(content: str, offset: int) -> str:
    """Return the full line of ``content`` that contains ``offset``."""
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", offset)
    if end == -1:
        end = len(content)
    return content[start:end]


def neighbour_lines(lines: Sequence[str], index: int) -> tuple[str, str, str]:
    """Return (previous, current, next) lines around a 0-based index."""
    prev_line = lines[index - 1] if index > 0 else ""
    current = lines[index] if index < len(lines) else ""
    next_line = lines[index + 1] if index + 1 < len(lines) else ""
    return prev_line, current, next_line


# ---------------------------------------------------------------------------
# Line predicates
# ---------------------------------------------------------------------------


def is_comment_line(line: str) -> bool:
    return line.strip().startswith("//")


def is_inside_string_literal(line: str, column: int) -> bool:
    """Return True if an odd number of quotes precede ``column`` on the line."""
    before = line[:column]
    return (before.count('"') + before.count("'")) % 2 == 1


def is_inside_block_comment(content: str, offset: int) -> bool:
    """Return True if ``offset`` falls after an unterminated ``/*``."""
    opened = content.rfind("/*", 0, offset)
    if opened == -1:
        return False
    return opened > content.rfind("*/", 0, offset)


def has_string_interpolation(line: str) -> bool:
    """Return True if the line uses ``$name`` or ``${expr}`` interpolation."""
    if "$" in line and not _ESCAPED_DOLLAR.search(line):
        return True
    return bool(_BRACED_INTERPOLATION.search(line))


def is_escape_only_literal(line: str) -> bool:
    """Return True if the line holds a literal like ``"\\n"`` or ``'\\t'``."""
    return bool(_ESCAPE_ONLY_LITERAL.search(line))


def is_rich_text_line(line: str) -> bool:
    return bool(_RICH_TEXT.search(line))


def has_dynamic_comment(
    lines: Sequence[str],
    index: int,
    patterns: Iterable[str] = DYNAMIC_COMMENT_PATTERNS,
) -> bool:
    """Return True if a "make this dynamic" comment sits on or next to a line.

    The previous, current and next lines are searched case-insensitively.
    """
    window = neighbour_lines(lines, index)
    return any(
        re.search(pattern, line, re.IGNORECASE)
        for pattern in patterns
        for line in window
    )


def is_member_or_identifier_suffix(before: str) -> bool:
    """Return True if the text before a call makes it a non-constructor.

    ``before`` is the stripped text preceding the call on its line. Calls
    preceded by ``.`` (member access), ``(`` or an identifier are not widget
    instantiations, except when the identifier is a keyword such as
    ``return`` or ``const``.
    """
    if before.endswith(".") or before.endswith("("):
        return True
    match = _IDENTIFIER_SUFFIX.search(before)
    if match is None:
        return False
    return match.group(0) not in _CONSTRUCTOR_KEYWORDS


def has_declaration_keyword(line: str) -> bool:
    """Return True if the line declares a const/static/final value."""
    return bool(_DECLARATION.search(line))


def is_secret_false_positive(matched_text: str, allow_list: Iterable[str]) -> bool:
    lowered = matched_text.lower()
    return any(entry in lowered for entry in allow_list)


# ---------------------------------------------------------------------------
# Listing helpers
# ---------------------------------------------------------------------------


def truncate_listing(items: Sequence[str], limit: int) -> list[str]:
    """Return at most ``limit`` items plus a "... and N more" line."""
    listed = list(items[:limit])
    if len(items) > limit:
        listed.append(f"  - ... and {len(items) - limit} more")
    return listed


def format_file_examples(paths: Sequence[str], limit: int) -> str:
    """Format up to ``limit`` paths as inline code, with an overflow count."""
    text = ", ".join(f"`{path}`" for path in paths[:limit])
    if len(paths) > limit:
        text += f" and {len(paths) - limit} more"
    return text


__all__ = [
    "format_file_examples",
    "has_declaration_keyword",
    "has_dynamic_comment",
    "has_folder_segment",
    "has_string_interpolation",
    "is_comment_line",
    "is_escape_only_literal",
    "is_generated_file",
    "is_inside_block_comment",
    "is_inside_string_literal",
    "is_member_or_identifier_suffix",
    "is_rich_text_line",
    "is_secret_false_positive",
    "is_source_file",
    "is_test_file",
    "is_ui_file",
    "line_at",
    "line_number_at",
    "neighbour_lines",
    "truncate_listing",
]
