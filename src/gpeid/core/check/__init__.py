"""
Document checking.

Public API:
    - CheckService: Validate gpEIDs found in text, files and directories
    - CheckResult: Findings and counters for a check run
    - Finding: One candidate token with its diagnostics
"""

from gpeid.core.check.service import CheckResult, CheckService, Finding

__all__ = ["CheckResult", "CheckService", "Finding"]
