"""
Character classes and low-level readers shared by every sub-grammar.

All readers take the input text and a cursor and return the new cursor; none
of them mutate anything. Letters are any Unicode "Letter" category (Lu, Ll,
Lt, Lm, Lo), digits are ASCII only, so ``Gebäude1`` is a single token while
``Gebäude١`` (Arabic-Indic digit) stops before the last character.
"""

import unicodedata

TBD = "TBD"

# Characters that start the next component of a gpEID
LOCATION_GAP_FOLLOWERS = frozenset(".+_:")
FUNCTION_CODE_FOLLOWERS = frozenset("._:-$|")
EXTENSION_SEPARATORS = frozenset("-$|")


def is_letter(char: str) -> bool:
    """Check if a character is a Unicode letter."""
    return unicodedata.category(char).startswith("L")


def is_digit(char: str) -> bool:
    """Check if a character is an ASCII digit."""
    return "0" <= char <= "9"


def is_alnum(char: str) -> bool:
    """Check if a character is a Unicode letter or an ASCII digit."""
    return is_digit(char) or is_letter(char)


def peek(text: str, pos: int) -> str | None:
    """Return the character at pos, or None past the end of input."""
    if 0 <= pos < len(text):
        return text[pos]
    return None


def read_alnum(text: str, pos: int) -> int:
    """
    Read the longest alphanumeric run starting at pos.

    Returns:
        Cursor just past the run (equal to pos if no run starts there)
    """
    end = pos
    while end < len(text) and is_alnum(text[end]):
        end += 1
    return end


def at_placeholder(text: str, pos: int) -> bool:
    """
    Check if the TBD placeholder starts at pos.

    The placeholder only counts as a whole word: ``TBD`` followed by another
    letter or digit (``TBDX``, ``TBD1``) is an ordinary token.

    Examples:
        >>> at_placeholder("TBD.005", 0)
        True
        >>> at_placeholder("TBDX", 0)
        False
    """
    if not text.startswith(TBD, pos):
        return False
    following = peek(text, pos + len(TBD))
    return following is None or not is_alnum(following)


def read_token(text: str, pos: int) -> tuple[str | None, int]:
    """
    Read a TBD placeholder or an alphanumeric run.

    Returns:
        (token, new cursor), or (None, pos) if nothing could be read
    """
    if at_placeholder(text, pos):
        return TBD, pos + len(TBD)
    end = read_alnum(text, pos)
    if end == pos:
        return None, pos
    return text[pos:end], end
