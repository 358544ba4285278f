"""
Check service for finding invalid gpEIDs in documents.

Provides high-level operations for:
- Scanning text for gpEID-shaped tokens
- Validating each candidate against the grammar
- Walking files and directories
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from gpeid.core.config.models import GpeidConfig
from gpeid.core.grammar import Diagnostic, validate
from gpeid.core.scan import find_candidates

logger = logging.getLogger(__name__)


@dataclass
class Finding:
    """
    A candidate token found in a document.

    Diagnostic offsets are relative to the token; `column` is where the token
    starts on its line, so `column + diagnostic.offset` is the document column.
    """

    token: str
    line: int
    column: int
    diagnostics: list[Diagnostic] = field(default_factory=list)
    source: str | None = None

    @property
    def valid(self) -> bool:
        return not self.diagnostics

    @property
    def end_column(self) -> int:
        return self.column + len(self.token)

    @property
    def message(self) -> str:
        """Message in the form shown next to an underlined token."""
        if self.valid:
            return f"Valid gpEID: {self.token}"
        return "Invalid gpEID: " + ", ".join(d.message for d in self.diagnostics)

    def __str__(self) -> str:
        """Format as 'source:line:col: message' with 1-based coordinates."""
        prefix = f"{self.source}:" if self.source else ""
        return f"{prefix}{self.line + 1}:{self.column + 1}: {self.message}"


@dataclass
class CheckResult:
    """
    Result of a check run.

    `findings` holds invalid candidates, plus valid ones when the service was
    asked to keep them.
    """

    findings: list[Finding] = field(default_factory=list)
    candidates_checked: int = 0
    files_checked: int = 0
    files_skipped: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if not f.valid]

    @property
    def has_errors(self) -> bool:
        """Check if any invalid gpEIDs were found."""
        return any(not f.valid for f in self.findings)

    @property
    def error_count(self) -> int:
        """Count of invalid gpEIDs."""
        return len(self.errors)

    def merge(self, other: CheckResult) -> None:
        """Add another result's findings and counters to this one."""
        self.findings.extend(other.findings)
        self.candidates_checked += other.candidates_checked
        self.files_checked += other.files_checked
        self.files_skipped.extend(other.files_skipped)


class CheckService:
    """
    Service for checking documents for invalid gpEIDs.

    Example:
        >>> service = CheckService(GpeidConfig())
        >>> result = service.check_text("Sensor =Haus+HLK_Sensor.000:Siemens.Model")
        >>> result.error_count
        1
    """

    def __init__(self, config: GpeidConfig | None = None, *, keep_valid: bool = False) -> None:
        """
        Initialize CheckService.

        Args:
            config: Loaded configuration (defaults to built-in defaults)
            keep_valid: Also record valid candidates as findings
        """
        self.config = config or GpeidConfig()
        self.keep_valid = keep_valid

    def check_text(self, text: str, source: str | None = None) -> CheckResult:
        """
        Validate every gpEID-shaped token in a piece of text.

        Args:
            text: Document contents
            source: Name reported with each finding (e.g. a file path)

        Returns:
            CheckResult for the text; empty if checking is disabled
        """
        result = CheckResult()
        if not self.config.enabled:
            return result

        for candidate in find_candidates(text):
            validation = validate(candidate.token)
            result.candidates_checked += 1
            if validation.valid and not self.keep_valid:
                continue
            result.findings.append(
                Finding(
                    token=candidate.token,
                    line=candidate.line,
                    column=candidate.column,
                    diagnostics=list(validation.diagnostics),
                    source=source,
                )
            )

        return result

    def check_file(self, path: Path) -> CheckResult:
        """
        Validate every gpEID in a file.

        Unreadable, oversized or non-UTF-8 files are skipped and listed in
        `files_skipped` rather than raising.
        """
        result = CheckResult()
        max_bytes = self.config.check.max_file_size_kb * 1024

        try:
            if path.stat().st_size > max_bytes:
                limit = self.config.check.max_file_size_kb
                logger.warning(f"Skipping {path}: larger than {limit} KiB")
                result.files_skipped.append(str(path))
                return result
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {path}: {e}")
            result.files_skipped.append(str(path))
            return result

        logger.debug(f"Checking {path}")
        result.merge(self.check_text(text, source=str(path)))
        result.files_checked += 1
        return result

    def iter_files(self, paths: Iterable[Path]) -> list[Path]:
        """
        Expand paths into the files to check.

        Files given explicitly are always included; directories are walked
        for files whose suffix is in `config.check.extensions`.
        """
        extensions = set(self.config.check.extensions)
        files: list[Path] = []
        for path in paths:
            if path.is_dir():
                files.extend(
                    sorted(
                        p for p in path.rglob("*")
                        if p.is_file() and p.suffix.lower() in extensions
                    )
                )
            else:
                files.append(path)
        return files

    def check_paths(self, paths: Iterable[Path]) -> CheckResult:
        """Validate every gpEID in the given files and directories."""
        result = CheckResult()
        if not self.config.enabled:
            logger.info("gpEID checking is disabled by configuration")
            return result

        for path in self.iter_files(paths):
            result.merge(self.check_file(path))
        return result
