# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern tables used by the quality gate checks.

Every table is an immutable tuple so that checks can receive them at
construction time and tests can override them without touching check logic.
"""

from __future__ import annotations

from typing import NamedTuple

# ---------------------------------------------------------------------------
# Hardcoded strings
# ---------------------------------------------------------------------------

# Quoted literals passed to UI text constructors. Literals that reference
# LocaleKeys or use ${...} interpolation are excluded by the lookaheads.
HARDCODED_STRING_PATTERNS: tuple[str, ...] = (
    r"Text\s*\(\s*[\"'](?!.*LocaleKeys)(?!.*\$\{).*[\"']",
    r"showMessage\s*\(\s*[\"'](?!.*LocaleKeys)(?!.*\$\{).*[\"']",
)

# Comments that mark a literal as intentionally temporary/dynamic. Checked
# (case-insensitive) on the previous, current and next line.
DYNAMIC_COMMENT_PATTERNS: tuple[str, ...] = (
    r"//.*dynamic.*based.*on.*item",
    r"//.*make.*dynamic.*based.*on",
    r"//.*should.*be.*dynamic",
    r"//.*can.*make.*dynamic",
    r"//.*TODO.*dynamic",
    r"//.*FIXME.*dynamic",
    r"//.*dynamic.*properties",
    r"//.*item\.properties",
    r"//.*based.*on.*properties",
)

# ---------------------------------------------------------------------------
# Debug prints and TODOs
# ---------------------------------------------------------------------------

PRINT_PATTERNS: tuple[str, ...] = (
    r"\bprint\s*\(",
    r"\bconsole\.log\s*\(",
)

# "// TODO" not followed by a ticket key such as "TENT-123".
TODO_WITHOUT_TICKET = r"//\s*TODO(?!:?\s*[A-Z]+-\d+)"

# ---------------------------------------------------------------------------
# flutter_screenutil conventions
# ---------------------------------------------------------------------------


class SuggestionRule(NamedTuple):
    """A regex paired with a fix suggestion.

    ``suggestion`` is a ``re.Match.expand`` template, so ``\\1`` refers to the
    captured literal.
    """

    pattern: str
    suggestion: str


_NUM = r"([1-9]\d*(?:\.\d+)?)"

# Zero literals never match: every numeric capture starts with [1-9].
SCREENUTIL_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(rf"SizedBox\(\s*height:\s*{_NUM}(?![.\w])", r"Use \1.h instead of hardcoded height"),
    SuggestionRule(rf"SizedBox\(\s*width:\s*{_NUM}(?![.\w])", r"Use \1.w instead of hardcoded width"),
    SuggestionRule(rf"Container\(\s*width:\s*{_NUM}(?![.\w])", r"Use \1.w instead of hardcoded width"),
    SuggestionRule(rf"Container\(\s*height:\s*{_NUM}(?![.\w])", r"Use \1.h instead of hardcoded height"),
    SuggestionRule(r"width:\s*size_\d+(?![.\w])", "Use .w extension for width dimension variables"),
    SuggestionRule(r"height:\s*size_\d+(?![.\w])", "Use .h extension for height dimension variables"),
    SuggestionRule(r"Container\(\s*width:\s*size_\d+(?![.\w])", "Use .w extension for width dimension variables"),
    SuggestionRule(r"Container\(\s*height:\s*size_\d+(?![.\w])", "Use .h extension for height dimension variables"),
    SuggestionRule(r"SizedBox\(\s*width:\s*size_\d+(?![.\w])", "Use .w extension for width dimension variables"),
    SuggestionRule(r"SizedBox\(\s*height:\s*size_\d+(?![.\w])", "Use .h extension for height dimension variables"),
    SuggestionRule(rf"fontSize:\s*{_NUM}(?![.\w])", r"Use \1.sp instead of hardcoded fontSize"),
    SuggestionRule(rf"TextStyle\(\s*fontSize:\s*{_NUM}(?![.\w])", r"Use \1.sp instead of hardcoded fontSize"),
    SuggestionRule(rf"BorderRadius\.circular\(\s*{_NUM}\s*\)", r"Use \1.r instead of hardcoded radius"),
    SuggestionRule(rf"Radius\.circular\(\s*{_NUM}\s*\)", r"Use \1.r instead of hardcoded radius"),
    SuggestionRule(rf"borderRadius:\s*BorderRadius\.circular\(\s*{_NUM}\s*\)", r"Use \1.r instead of hardcoded radius"),
    SuggestionRule(rf"EdgeInsets\.all\(\s*{_NUM}(?![.\w])", r"Use EdgeInsets.all(\1.w) for width-based padding"),
    SuggestionRule(rf"horizontal:\s*{_NUM}(?![.\w])", r"Use horizontal: \1.w"),
    SuggestionRule(rf"vertical:\s*{_NUM}(?![.\w])", r"Use vertical: \1.h"),
    SuggestionRule(rf"left:\s*{_NUM}(?![.\w])", r"Use left: \1.w"),
    SuggestionRule(rf"right:\s*{_NUM}(?![.\w])", r"Use right: \1.w"),
    SuggestionRule(rf"top:\s*{_NUM}(?![.\w])", r"Use top: \1.h"),
    SuggestionRule(rf"bottom:\s*{_NUM}(?![.\w])", r"Use bottom: \1.h"),
    SuggestionRule(rf"children:\s*\[\s*SizedBox\(\s*height:\s*{_NUM}\s*\)", r"Use SizedBox(height: \1.h)"),
    SuggestionRule(rf"children:\s*\[\s*SizedBox\(\s*width:\s*{_NUM}\s*\)", r"Use SizedBox(width: \1.w)"),
    SuggestionRule(rf"BoxConstraints\(\s*maxWidth:\s*{_NUM}\s*\)", r"Use maxWidth: \1.w"),
    SuggestionRule(rf"BoxConstraints\(\s*minWidth:\s*{_NUM}\s*\)", r"Use minWidth: \1.w"),
    SuggestionRule(rf"BoxConstraints\(\s*maxHeight:\s*{_NUM}\s*\)", r"Use maxHeight: \1.h"),
    SuggestionRule(rf"BoxConstraints\(\s*minHeight:\s*{_NUM}\s*\)", r"Use minHeight: \1.h"),
)

# ---------------------------------------------------------------------------
# Smart widgets
# ---------------------------------------------------------------------------

# (base widget, mandated wrapper), in reporting order.
WIDGET_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("Text", "SmartText"),
    ("Row", "SmartRow"),
    ("Column", "SmartColumn"),
    ("ElevatedButton", "SmartButton"),
    ("TextButton", "SmartButton"),
    ("OutlinedButton", "SmartButton"),
    ("TextField", "SmartTextField"),
    ("TextFormField", "SmartTextField"),
    ("Checkbox", "SmartCheckbox"),
    ("CheckboxListTile", "SmartCheckbox"),
    ("Radio", "SmartRadioButton"),
    ("RadioListTile", "SmartRadioButton"),
    ("DropdownButton", "SmartDropDown"),
    ("DropdownButtonFormField", "SmartDropDown"),
    ("AppBar", "SmartAppBar"),
    ("TabBar", "SmartTabBar"),
    ("TabBarView", "SmartTabBar"),
    ("CircularProgressIndicator", "SmartCircularProgressIndicator"),
    ("SingleChildScrollView", "SmartSingleChildScrollView"),
    ("ExpansionTile", "SmartExpansionTile"),
)

# Button checks are skipped in files that use SmartTextField (form screens).
BUTTON_WIDGETS: frozenset[str] = frozenset(
    {"ElevatedButton", "TextButton", "OutlinedButton"}
)

IMAGE_WRAPPER = "SmartImage"
IMAGE_PATTERNS: tuple[str, ...] = (
    r"Image\.asset\s*\(",
    r"Image\.network\s*\(",
    r"CachedNetworkImage\s*\(",
    r"SvgPicture\.asset\s*\(",
    r"SvgPicture\.network\s*\(",
)

GRADIENT_WRAPPER = "SmartGradientContainer"
GRADIENT_PATTERNS: tuple[str, ...] = (
    r"Container\s*\(\s*[^)]*decoration:\s*BoxDecoration\s*\([^)]*gradient:",
    r"Container\s*\(\s*[^)]*decoration:\s*BoxDecoration\s*\([^)]*LinearGradient",
)

# A line containing any of these is a localisation or helper call, not a
# widget instantiation.
WIDGET_HELPER_MARKERS: tuple[str, ...] = (
    ".tr",
    "LocaleKeys",
    "clearTextField",
    "showMessage",
    "getHintText",
    "controller.",
)

# Matched over whole file content with MULTILINE | DOTALL.
WRAPPING_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartRow\s*\(", "SmartRow already includes Container properties"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartColumn\s*\(", "SmartColumn already includes Container properties"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartButton\s*\(", "SmartButton already includes Container properties"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartTextField\s*\(", "SmartTextField already includes Container properties"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartRow\s*\([^)]*padding:", "Use SmartRow padding property instead of Container"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartRow\s*\([^)]*margin:", "Use SmartRow margin property instead of Container"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartRow\s*\([^)]*decoration:", "Use SmartRow decoration property instead of Container"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartColumn\s*\([^)]*padding:", "Use SmartColumn padding property instead of Container"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartColumn\s*\([^)]*margin:", "Use SmartColumn margin property instead of Container"),
    SuggestionRule(r"Container\s*\(\s*[^)]*child:\s*SmartColumn\s*\([^)]*decoration:", "Use SmartColumn decoration property instead of Container"),
    SuggestionRule(r"Padding\s*\(\s*[^)]*child:\s*SmartText\s*\([^)]*optionalPadding:", "SmartText already has optionalPadding property"),
    SuggestionRule(r"GestureDetector\s*\(\s*[^)]*onTap:[^)]*child:\s*SmartText\s*\([^)]*onTap:", "SmartText already has onTap property"),
)

# ---------------------------------------------------------------------------
# Secrets
# ---------------------------------------------------------------------------


class SecretPattern(NamedTuple):
    """A secret-shaped regex.

    ``assignment`` patterns start at an identifier (``api_key = "..."``); a
    match whose start sits inside a string literal is text, not code, and is
    skipped. Value-shaped patterns (bearer tokens, Google keys) always live
    inside literals and are not subject to that exclusion.
    """

    pattern: str
    label: str
    assignment: bool = True


SECRET_PATTERNS: tuple[SecretPattern, ...] = (
    SecretPattern(r"api[_-]?key\s*[=:]\s*[\"'][A-Za-z0-9\-_]{20,}[\"']", "API key"),
    SecretPattern(r"secret[_-]?key\s*[=:]\s*[\"'][A-Za-z0-9\-_]{15,}[\"']", "Secret key"),
    SecretPattern(
        r"password\s*[=:]\s*[\"'][A-Za-z0-9!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]{8,}[\"']",
        "Password",
    ),
    SecretPattern(r"token\s*[=:]\s*[\"'][A-Za-z0-9\-_]{20,}[\"']", "Token"),
    SecretPattern(r"Bearer\s+[A-Za-z0-9\-_]{20,}", "Bearer token", assignment=False),
    SecretPattern(r"AIza[0-9A-Za-z\-_]{35}", "Google API key", assignment=False),
    SecretPattern(r"private[_-]?key\s*[=:]\s*[\"'][A-Za-z0-9\-_]{30,}[\"']", "Private key"),
)

# Lower-cased substrings that mark a match as a placeholder, endpoint or
# localisation key rather than a real secret.
SECRET_ALLOW_LIST: tuple[str, ...] = (
    "your_api_key",
    "your_password",
    "your_token",
    "placeholder",
    "example",
    "sample",
    "forgotpassword",
    "resetpassword",
    "refreshtoken",
    "changepassword",
    "change_password_page",
    "localekeys",
    "static const",
    "const string",
    "enterpassword",
    "currentpassword",
    "newpassword",
    "confirmpassword",
    "pleaseenterpassword",
    "pleaseenterpasscode",
    '""',
    "''",
    "null",
    "undefined",
    "/mobile/user/",
    "/auth/",
)

# ---------------------------------------------------------------------------
# Path scoping
# ---------------------------------------------------------------------------

UI_SEGMENT = "/ui/"
GENERATED_MARKERS: tuple[str, ...] = ("/generated/", ".g.dart")
TEST_MARKERS: tuple[str, ...] = ("/test/", "_test.dart")
SMART_WIDGET_DEFINITION_MARKER = "/widgets/smart_"

# (folder segment, required file suffix) for naming/folder checks.
LAYER_FOLDERS: tuple[tuple[str, str], ...] = (
    ("controller", "_controller"),
    ("view", "_page"),
    ("repository", "_repository"),
)


__all__ = [
    "BUTTON_WIDGETS",
    "DYNAMIC_COMMENT_PATTERNS",
    "GENERATED_MARKERS",
    "GRADIENT_PATTERNS",
    "GRADIENT_WRAPPER",
    "HARDCODED_STRING_PATTERNS",
    "IMAGE_PATTERNS",
    "IMAGE_WRAPPER",
    "LAYER_FOLDERS",
    "PRINT_PATTERNS",
    "SCREENUTIL_RULES",
    "SECRET_ALLOW_LIST",
    "SECRET_PATTERNS",
    "SMART_WIDGET_DEFINITION_MARKER",
    "SecretPattern",
    "SuggestionRule",
    "TEST_MARKERS",
    "TODO_WITHOUT_TICKET",
    "UI_SEGMENT",
    "WIDGET_HELPER_MARKERS",
    "WIDGET_REPLACEMENTS",
    "WRAPPING_RULES",
]
