# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""GitLab CI configuration patching.

Adds an ``mr-check`` stage and a ``pr_checks`` job that runs the quality
gate on merge request pipelines. The file is edited as text so that the
user's comments, anchors and ordering survive; running the patch twice
changes nothing.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

STAGE_NAME = "mr-check"
JOB_NAME = "pr_checks"

JOB_SNIPPET = f"""\
{JOB_NAME}:
  stage: {STAGE_NAME}
  image: python:3.11
  before_script:
    - pip install mrgate
  script:
    - python -m mrgate check
  rules:
    - if: '$CI_PIPELINE_SOURCE == "merge_request_event"'
  allow_failure: false
"""

_HAS_STAGE = re.compile(rf"^\s*-\s*{STAGE_NAME}\s*$", re.MULTILINE)
_HAS_INLINE_STAGE = re.compile(rf"^stages:[ \t]*\[[^\]\n]*\b{STAGE_NAME}\b[^\]\n]*\]", re.MULTILINE)
_HAS_JOB = re.compile(rf"^\s*{JOB_NAME}:\s*$", re.MULTILINE)
_STAGES_BLOCK = re.compile(r"^stages:[ \t]*\n((?:[ \t]*-[ \t].*\n)*)", re.MULTILINE)
_STAGES_INLINE = re.compile(r"^(stages:[ \t]*\[)([^\]\n]*)(\])", re.MULTILINE)


def _add_stage(content: str) -> str:
    if _HAS_STAGE.search(content) or _HAS_INLINE_STAGE.search(content):
        return content

    inline = _STAGES_INLINE.search(content)
    if inline is not None:
        items = inline.group(2).strip()
        joined = f"{items}, {STAGE_NAME}" if items else STAGE_NAME
        return (
            content[: inline.start()]
            + f"{inline.group(1)}{joined}{inline.group(3)}"
            + content[inline.end() :]
        )

    block = _STAGES_BLOCK.search(content)
    if block is not None:
        items = block.group(1)
        indent = items[: len(items) - len(items.lstrip(" \t"))] if items else "  "
        return (
            content[: block.end()]
            + f"{indent}- {STAGE_NAME}\n"
            + content[block.end() :]
        )

    return f"stages:\n  - {STAGE_NAME}\n\n{content}"


def _add_job(content: str) -> str:
    if _HAS_JOB.search(content):
        return content
    if not content.endswith("\n"):
        content += "\n"
    if not content.endswith("\n\n"):
        content += "\n"
    return content + JOB_SNIPPET


def patch_gitlab_ci(content: str) -> str:
    """Return ``content`` with the stage and the job present."""
    if content and not content.endswith("\n"):
        content += "\n"
    return _add_job(_add_stage(content))


def ensure_gitlab_ci(path: str | Path = ".gitlab-ci.yml") -> bool:
    """Create or patch a GitLab CI file so that it runs the quality gate.

    Args:
        path: Location of the CI file.

    Returns:
        True if the file was created or modified.
    """
    path = Path(path)
    if not path.exists():
        path.write_text(f"stages:\n  - {STAGE_NAME}\n\n{JOB_SNIPPET}", encoding="utf-8")
        logger.info("Created %s with the %s job", path, JOB_NAME)
        return True

    original = path.read_text(encoding="utf-8")
    updated = patch_gitlab_ci(original)
    if updated == original:
        logger.info("%s already runs the %s job", path, JOB_NAME)
        return False

    path.write_text(updated, encoding="utf-8")
    logger.info("Updated %s with the %s stage and job", path, STAGE_NAME)
    return True


__all__ = ["JOB_NAME", "JOB_SNIPPET", "STAGE_NAME", "ensure_gitlab_ci", "patch_gitlab_ci"]
