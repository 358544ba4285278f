"""
Type grammar: _core(.core)*.counter

The dots between core segments and the dot before the counter look the same.
The core only continues past a dot when the character after it is not a
digit, and a core segment that fails to parse after a dot hands that dot back
to the counter. A counter of 000 reports ZeroCounterNotAllowed and then fails
the rule with InvalidCounter, so the caller sees both.
"""

from gpeid.core.grammar.chars import TBD, at_placeholder, is_digit, is_letter, peek, read_alnum
from gpeid.core.grammar.diagnostics import Diagnostic, DiagnosticCode, GrammarError
from gpeid.core.grammar.models import TypeId

COUNTER_LENGTH = 3
ZERO_COUNTER = "000"


def read_core_segment(text: str, pos: int) -> tuple[str | None, int]:
    """
    Read TBD or an alphanumeric run containing at least one letter.

    Returns:
        (segment, new cursor), or (None, pos) for an empty or all-digit run
    """
    if at_placeholder(text, pos):
        return TBD, pos + len(TBD)
    end = read_alnum(text, pos)
    segment = text[pos:end]
    if not any(is_letter(c) for c in segment):
        return None, pos
    return segment, end


def _parse_core(text: str, pos: int) -> tuple[list[str], int]:
    segment, pos = read_core_segment(text, pos)
    if segment is None:
        return [], pos
    core = [segment]

    while peek(text, pos) == ".":
        following = peek(text, pos + 1)
        if following is None or is_digit(following):
            break
        segment, end = read_core_segment(text, pos + 1)
        if segment is None:
            # Leave the dot for the counter
            break
        core.append(segment)
        pos = end

    return core, pos


def _read_counter(text: str, pos: int) -> tuple[str | None, int, list[Diagnostic]]:
    end = pos
    while end - pos < COUNTER_LENGTH and end < len(text) and is_digit(text[end]):
        end += 1
    counter = text[pos:end]

    if len(counter) != COUNTER_LENGTH:
        return None, end, []
    if counter == ZERO_COUNTER:
        # Anchored at the counter start so the span covers all three digits.
        zero = Diagnostic(
            code=DiagnosticCode.ZERO_COUNTER_NOT_ALLOWED,
            message=f"Counter cannot be '{ZERO_COUNTER}'",
            offset=pos,
            length=COUNTER_LENGTH,
        )
        return None, end, [zero]
    return counter, end, []


def parse_type(text: str, pos: int) -> tuple[TypeId, int]:
    """
    Parse the type component starting at pos.

    Returns:
        (type id, new cursor)

    Raises:
        GrammarError: If the '_' prefix, the core, the counter dot or a valid
            counter is missing
    """
    if peek(text, pos) != "_":
        raise GrammarError(
            DiagnosticCode.MISSING_TYPE_PREFIX,
            "Expected '_' to start the type",
            pos,
        )
    pos += 1

    core, pos = _parse_core(text, pos)
    if not core:
        raise GrammarError(
            DiagnosticCode.INVALID_TYPE_CORE,
            "Invalid type: expected 'TBD' or a segment containing a letter",
            pos,
            length=max(read_alnum(text, pos) - pos, 1),
        )

    if peek(text, pos) != ".":
        raise GrammarError(
            DiagnosticCode.MISSING_COUNTER_SEPARATOR,
            "Expected '.' before the 3-digit type counter",
            pos,
        )
    pos += 1

    counter, end, soft = _read_counter(text, pos)
    if counter is None:
        raise GrammarError(
            DiagnosticCode.INVALID_COUNTER,
            "Invalid type counter: expected exactly 3 digits",
            pos,
            length=max(end - pos, 1),
            preceding=soft,
        )

    return TypeId(core=tuple(core), counter=counter), end
