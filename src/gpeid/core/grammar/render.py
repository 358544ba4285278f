"""
Human-readable breakdown of a parsed gpEID.

Used for hover-style views: one labelled line per component, with the
Extensions line only present when the identifier has extensions.
"""

from gpeid.core.grammar.models import Identifier


def describe(identifier: Identifier) -> list[tuple[str, str]]:
    """
    Break an identifier into labelled component strings.

    Example:
        >>> from gpeid.core.grammar import parse
        >>> rows = describe(parse("=Site1..Room5+TBD.HLK_TBD.TBD.005:TBD.TBD"))
        >>> rows[0]
        ('Location', '=Site1..Room5')
        >>> rows[2]
        ('Type', '_TBD.TBD.005')
    """
    rows = [
        ("Location", identifier.location_text),
        ("Function", identifier.function_text),
        ("Type", str(identifier.type)),
        ("Product", str(identifier.product)),
    ]
    if identifier.extensions:
        rows.append(("Extensions", identifier.extensions_text))
    return rows


def describe_markdown(identifier: Identifier) -> str:
    """Render the breakdown as a markdown bullet list."""
    lines = ["**Valid gpEID**", ""]
    lines.extend(f"- **{label}**: {text}" for label, text in describe(identifier))
    return "\n".join(lines)
