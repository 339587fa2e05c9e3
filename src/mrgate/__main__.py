# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Merge request quality gate CLI.

Evaluates a GitLab merge request of a Flutter/GetX project against the
quality rules, prints a console report, posts the report as an MR note and
exits with a status that GitLab CI uses to block or allow the merge.

Usage:
    python -m mrgate check
    python -m mrgate check --policy .mrgate.yaml --no-comment
    python -m mrgate check --snapshot mr.json
    python -m mrgate init-ci
    python -m mrgate validate-policy .mrgate.yaml

Exit Codes:
    0 - Passed: no critical check failed
    1 - Failed: at least one critical check failed, or the MR could not be fetched
    2 - Error: missing CI variables, invalid policy or unexpected failure
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from mrgate.ci.ci_config import ensure_gitlab_ci
from mrgate.errors import FatalFetchError, PolicyLoadError
from mrgate.gitlab.client_gitlab import GitLabClient
from mrgate.gitlab.poster_mr_note import MrNotePoster
from mrgate.runner.runner_mr_check import MrCheckResult, RunnerMrCheck
from mrgate.schemas.model_gate_policy import ModelGatePolicy
from mrgate.settings import MrGateSettings
from mrgate.snapshot.source_snapshot import SnapshotDiffSource
from mrgate.validators.validator_policy import ValidatorPolicy, load_policy

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _get_log_level(level_name: str) -> int:
    """Resolve a level name with a safe fallback to INFO."""
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=_get_log_level(level_name),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def _positive_seconds(value: str) -> float:
    """argparse type for a strictly positive number of seconds."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return seconds


def _format_missing_variables(settings: MrGateSettings) -> str:
    lines = ["❌ ERROR: Missing required environment variables"]
    for name, present in settings.required_status():
        lines.append(f"   {name}: {'✓' if present else '✗'}")
    return "\n".join(lines)


def _resolve_policy(
    parsed_args: argparse.Namespace,
    settings: MrGateSettings,
) -> ModelGatePolicy:
    policy = load_policy(parsed_args.policy or settings.policy_path)
    label = parsed_args.project_label or settings.project_label
    if label:
        policy = policy.model_copy(update={"project_label": label})
    return policy


def _run_check(parsed_args: argparse.Namespace, settings: MrGateSettings) -> int:
    try:
        policy = _resolve_policy(parsed_args, settings)
    except PolicyLoadError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    deadline = parsed_args.deadline
    if deadline is None:
        deadline = settings.deadline_seconds

    if parsed_args.snapshot:
        source = SnapshotDiffSource.from_file(parsed_args.snapshot)
        result = RunnerMrCheck(source, policy, deadline_seconds=deadline).run()
        return _finish(result, parsed_args)

    missing = settings.missing_required()
    if missing:
        print(_format_missing_variables(settings), file=sys.stderr)
        return EXIT_ERROR

    with GitLabClient(
        settings.project_id,
        settings.mr_iid,
        settings.token,
        settings.api_url,
    ) as client:
        sink = None
        if not parsed_args.no_comment:
            sink = MrNotePoster(client, replace_previous=parsed_args.replace_previous)
        result = RunnerMrCheck(client, policy, deadline_seconds=deadline).run(sink=sink)
    return _finish(result, parsed_args)


def _finish(result: MrCheckResult, parsed_args: argparse.Namespace) -> int:
    print(result.console_report)
    if parsed_args.comment_file:
        Path(parsed_args.comment_file).write_text(result.comment_body, encoding="utf-8")
        logger.info("Wrote comment body to %s", parsed_args.comment_file)
    return result.exit_code


def _run_init_ci(parsed_args: argparse.Namespace) -> int:
    changed = ensure_gitlab_ci(parsed_args.path)
    if changed:
        print(f"✅ {parsed_args.path} configured with the mr-check stage")
    else:
        print(f"✅ {parsed_args.path} already configured")
    return EXIT_PASSED


def _run_validate_policy(parsed_args: argparse.Namespace) -> int:
    result = ValidatorPolicy().validate_file(parsed_args.policy_file)
    for warning in result.warnings:
        print(f"WARNING: {warning}")
    if not result.is_valid:
        print(f"Policy file {parsed_args.policy_file!r} is invalid:")
        for error in result.errors:
            print(f"  ERROR: {error}")
        return EXIT_ERROR
    print(f"Policy file {parsed_args.policy_file!r} is valid.")
    return EXIT_PASSED


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Merge request quality gate for Flutter/GetX projects on GitLab",
        prog="python -m mrgate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment (check):
  CI_API_V4_URL          GitLab API base URL (default https://gitlab.com/api/v4)
  CI_PROJECT_ID          Project ID (required)
  CI_MERGE_REQUEST_IID   Merge request IID (required)
  GITLAB_TOKEN           API token (required)
  MRGATE_PROJECT_LABEL   Label used in report headings
  MRGATE_POLICY_PATH     Policy YAML file
  MRGATE_DEADLINE_SECONDS  Time budget for one run
  LOG_LEVEL              Logging level (default INFO)

Examples:
  %(prog)s check                             # Evaluate the current MR and comment
  %(prog)s check --no-comment                # Evaluate without posting
  %(prog)s check --snapshot mr.json          # Evaluate an offline snapshot
  %(prog)s init-ci                           # Add the pr_checks job to .gitlab-ci.yml
  %(prog)s validate-policy .mrgate.yaml      # Check a policy file
""",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Evaluate a merge request")
    check.add_argument(
        "--policy",
        "-p",
        metavar="PATH",
        default=None,
        help="Policy YAML file (default: MRGATE_POLICY_PATH or built-in policy)",
    )
    check.add_argument(
        "--snapshot",
        metavar="PATH",
        default=None,
        help="Read the MR from a JSON snapshot instead of GitLab (never comments)",
    )
    check.add_argument(
        "--no-comment",
        action="store_true",
        help="Do not post the report as an MR note",
    )
    check.add_argument(
        "--replace-previous",
        action="store_true",
        help="Delete earlier quality gate notes before posting",
    )
    check.add_argument(
        "--comment-file",
        metavar="PATH",
        default=None,
        help="Also write the comment body to this file",
    )
    check.add_argument(
        "--deadline",
        type=_positive_seconds,
        metavar="SECONDS",
        default=None,
        help="Skip remaining checks after this many seconds",
    )
    check.add_argument(
        "--project-label",
        metavar="LABEL",
        default=None,
        help="Label used in report headings",
    )

    init_ci = subparsers.add_parser("init-ci", help="Add the pr_checks job to GitLab CI")
    init_ci.add_argument(
        "--path",
        default=".gitlab-ci.yml",
        help="CI file to create or patch (default: .gitlab-ci.yml)",
    )

    validate = subparsers.add_parser("validate-policy", help="Validate a policy file")
    validate.add_argument("policy_file", help="Policy YAML file")

    return parser


def main(args: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).

    Returns:
        Exit code: 0 passed, 1 failed, 2 configuration error.
    """
    parser = _build_parser()
    parsed_args = parser.parse_args(args)

    try:
        settings = MrGateSettings()
    except ValidationError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    _configure_logging(settings.log_level)

    try:
        if parsed_args.command == "check":
            return _run_check(parsed_args, settings)
        if parsed_args.command == "init-ci":
            return _run_init_ci(parsed_args)
        return _run_validate_policy(parsed_args)

    except FatalFetchError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_FAILED

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
