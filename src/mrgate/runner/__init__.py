"""Quality gate runner and report rendering."""

from mrgate.runner.renderer_report import COMMENT_MARKER, ReportRenderer
from mrgate.runner.runner_mr_check import MrCheckResult, RunnerMrCheck

__all__ = ["COMMENT_MARKER", "MrCheckResult", "ReportRenderer", "RunnerMrCheck"]
