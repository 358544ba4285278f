"""
Diagnostics produced by the gpEID grammar.

A diagnostic pins a message to an offset in the validated token so callers can
underline the offending substring. Rules raise GrammarError for hard failures;
the driver converts it into a ValidationResult, so nothing escapes validate().

Exception Hierarchy:
    GrammarError (carries every diagnostic collected before the abort)
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from gpeid.core.grammar.models import Identifier


class Severity(str, Enum):
    """Severity levels for diagnostics."""

    ERROR = "error"


class DiagnosticCode(str, Enum):
    """Every diagnostic the grammar can emit."""

    # Structural prefixes
    MISSING_LOCATION_PREFIX = "MissingLocationPrefix"
    MISSING_FUNCTION_PREFIX = "MissingFunctionPrefix"
    MISSING_TYPE_PREFIX = "MissingTypePrefix"
    MISSING_PRODUCT_PREFIX = "MissingProductPrefix"

    # Segment content
    MISSING_ROOT_LOCATION = "MissingRootLocation"
    INVALID_ROOT_LOCATION = "InvalidRootLocation"
    INVALID_FUNCTION_SEGMENT = "InvalidFunctionSegment"
    INVALID_TYPE_CORE = "InvalidTypeCore"
    INVALID_MANUFACTURER = "InvalidManufacturer"
    MISSING_PRODUCT_SEPARATOR = "MissingProductSeparator"
    INVALID_PRODUCT = "InvalidProduct"

    # Type counter
    MISSING_COUNTER_SEPARATOR = "MissingCounterSeparator"
    INVALID_COUNTER = "InvalidCounter"
    ZERO_COUNTER_NOT_ALLOWED = "ZeroCounterNotAllowed"

    TRAILING_CHARACTERS = "TrailingCharacters"


class Diagnostic(BaseModel):
    """A positioned grammar message."""

    code: DiagnosticCode
    message: str
    offset: int = Field(ge=0, description="0-based character index into the token")
    length: int = Field(default=1, ge=1, description="Number of characters to underline")
    severity: Severity = Severity.ERROR

    model_config = ConfigDict(frozen=True)

    @property
    def end(self) -> int:
        """Offset just past the underlined span."""
        return self.offset + self.length

    def __str__(self) -> str:
        """Format as '<message> (at <offset>)'."""
        return f"{self.message} (at {self.offset})"


class ValidationResult(BaseModel):
    """
    Outcome of validating one token.

    The identifier is only present when the token is valid; a failed parse
    never exposes a partial decomposition.
    """

    token: str
    valid: bool
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    identifier: Identifier | None = None

    @property
    def messages(self) -> list[str]:
        """Diagnostic messages in the order they were raised."""
        return [d.message for d in self.diagnostics]

    @property
    def codes(self) -> list[DiagnosticCode]:
        """Diagnostic codes in the order they were raised."""
        return [d.code for d in self.diagnostics]

    def summary(self) -> str:
        """Messages joined the way editor consumers display them."""
        return ", ".join(self.messages)


class GrammarError(Exception):
    """
    Hard grammar failure that aborts the parse.

    Attributes:
        diagnostics: Soft diagnostics raised earlier in the same rule, followed
            by the diagnostic for this failure
    """

    def __init__(
        self,
        code: DiagnosticCode,
        message: str,
        offset: int,
        *,
        length: int = 1,
        preceding: list[Diagnostic] | None = None,
    ) -> None:
        super().__init__(message)
        self.diagnostic = Diagnostic(code=code, message=message, offset=offset, length=length)
        self.diagnostics = [*(preceding or []), self.diagnostic]

    @property
    def code(self) -> DiagnosticCode:
        return self.diagnostic.code

    @property
    def offset(self) -> int:
        return self.diagnostic.offset
