"""
Extension grammar: ({-|$||}part(.part)*)*

Extensions are optional, so this rule never fails. A separator with no part
after it, or a dot with no part after it, is handed back and the sequence
stops there; whatever is left is reported by the driver as trailing input.
"""

from gpeid.core.grammar.chars import EXTENSION_SEPARATORS, peek, read_alnum
from gpeid.core.grammar.models import Extension


def _parse_parts(text: str, pos: int) -> tuple[list[str], int]:
    end = read_alnum(text, pos)
    if end == pos:
        return [], pos
    parts = [text[pos:end]]
    pos = end

    while peek(text, pos) == ".":
        end = read_alnum(text, pos + 1)
        if end == pos + 1:
            break
        parts.append(text[pos + 1 : end])
        pos = end

    return parts, pos


def parse_extensions(text: str, pos: int) -> tuple[tuple[Extension, ...], int]:
    """
    Parse zero or more extension blocks starting at pos.

    Returns:
        (extensions, new cursor)
    """
    extensions: list[Extension] = []

    while (separator := peek(text, pos)) in EXTENSION_SEPARATORS:
        parts, end = _parse_parts(text, pos + 1)
        if not parts:
            break
        extensions.append(Extension(separator=separator, parts=tuple(parts)))
        pos = end

    return tuple(extensions), pos
