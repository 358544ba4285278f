"""
Function grammar: +segment(.segment)*

Each segment is TBD or a three-letter uppercase code (HLK, VEN, TMP). The
character after a code must end it, which is what separates "HLK" from the
first three letters of "HLKX".
"""

from gpeid.core.grammar.chars import FUNCTION_CODE_FOLLOWERS, TBD, at_placeholder, peek
from gpeid.core.grammar.diagnostics import DiagnosticCode, GrammarError

CODE_LENGTH = 3


def read_function_code(text: str, pos: int) -> tuple[str | None, int]:
    """
    Read a three-letter uppercase function code.

    The code must be followed by a dot, another component delimiter or the
    end of input.

    Returns:
        (code, new cursor), or (None, pos) if no code starts at pos

    Examples:
        >>> read_function_code("HLK_Sensor", 0)
        ('HLK', 3)
        >>> read_function_code("HLKX_Sensor", 0)
        (None, 0)
    """
    end = pos
    while end - pos < CODE_LENGTH and end < len(text) and "A" <= text[end] <= "Z":
        end += 1
    if end - pos != CODE_LENGTH:
        return None, pos

    following = peek(text, end)
    if following is not None and following not in FUNCTION_CODE_FOLLOWERS:
        return None, pos
    return text[pos:end], end


def _read_segment(text: str, pos: int) -> tuple[str, int]:
    if at_placeholder(text, pos):
        return TBD, pos + len(TBD)
    code, end = read_function_code(text, pos)
    if code is None:
        raise GrammarError(
            DiagnosticCode.INVALID_FUNCTION_SEGMENT,
            "Invalid function segment: expected 'TBD' or three uppercase letters",
            pos,
        )
    return code, end


def parse_function(text: str, pos: int) -> tuple[tuple[str, ...], int]:
    """
    Parse the function component starting at pos.

    Returns:
        (segments, new cursor)

    Raises:
        GrammarError: If the '+' prefix is missing or any segment is invalid
    """
    if peek(text, pos) != "+":
        raise GrammarError(
            DiagnosticCode.MISSING_FUNCTION_PREFIX,
            "Expected '+' to start the function",
            pos,
        )
    pos += 1

    segment, pos = _read_segment(text, pos)
    segments = [segment]
    while peek(text, pos) == ".":
        segment, pos = _read_segment(text, pos + 1)
        segments.append(segment)

    return tuple(segments), pos
