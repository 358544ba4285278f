"""
Location grammar: =Liegenschaft(.segment)*

The root segment (Liegenschaft) is mandatory and must be a real token. Later
segments may be TBD, a real token, or a gap: a dot directly followed by
another delimiter keeps an empty segment so the hierarchy levels stay in
place (=Site1..Room5 → ["Site1", "", "Room5"]).
"""

from gpeid.core.grammar.chars import (
    LOCATION_GAP_FOLLOWERS,
    TBD,
    at_placeholder,
    peek,
    read_alnum,
    read_token,
)
from gpeid.core.grammar.diagnostics import DiagnosticCode, GrammarError


def parse_location(text: str, pos: int) -> tuple[tuple[str, ...], int]:
    """
    Parse the location component starting at pos.

    Returns:
        (segments, new cursor)

    Raises:
        GrammarError: If the '=' prefix or the root segment is missing
    """
    if peek(text, pos) != "=":
        raise GrammarError(
            DiagnosticCode.MISSING_LOCATION_PREFIX,
            "Expected '=' to start the location",
            pos,
        )
    pos += 1

    if at_placeholder(text, pos):
        raise GrammarError(
            DiagnosticCode.MISSING_ROOT_LOCATION,
            f"Liegenschaft cannot be '{TBD}'",
            pos,
            length=len(TBD),
        )
    end = read_alnum(text, pos)
    if end == pos:
        raise GrammarError(
            DiagnosticCode.INVALID_ROOT_LOCATION,
            "Invalid Liegenschaft: expected a letter or digit",
            pos,
        )
    segments = [text[pos:end]]
    pos = end

    while peek(text, pos) == ".":
        pos += 1
        if peek(text, pos) in LOCATION_GAP_FOLLOWERS:
            segments.append("")
            continue
        token, pos = read_token(text, pos)
        # A dot followed by anything else is consumed without adding a segment
        if token is not None:
            segments.append(token)

    return tuple(segments), pos
