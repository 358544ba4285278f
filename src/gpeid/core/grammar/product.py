"""Product grammar: :manufacturer.product"""

from gpeid.core.grammar.chars import peek, read_token
from gpeid.core.grammar.diagnostics import DiagnosticCode, GrammarError
from gpeid.core.grammar.models import ProductId


def parse_product(text: str, pos: int) -> tuple[ProductId, int]:
    """
    Parse the product component starting at pos.

    Exactly two tokens are read. Anything after the product token is left
    for the extension grammar or the trailing-input check.

    Raises:
        GrammarError: If the ':' prefix, a token or the separating dot is missing
    """
    if peek(text, pos) != ":":
        raise GrammarError(
            DiagnosticCode.MISSING_PRODUCT_PREFIX,
            "Expected ':' to start the product",
            pos,
        )
    pos += 1

    manufacturer, pos = read_token(text, pos)
    if manufacturer is None:
        raise GrammarError(
            DiagnosticCode.INVALID_MANUFACTURER,
            "Invalid manufacturer: expected 'TBD' or letters and digits",
            pos,
        )

    if peek(text, pos) != ".":
        raise GrammarError(
            DiagnosticCode.MISSING_PRODUCT_SEPARATOR,
            "Expected '.' between manufacturer and product",
            pos,
        )
    pos += 1

    product, pos = read_token(text, pos)
    if product is None:
        raise GrammarError(
            DiagnosticCode.INVALID_PRODUCT,
            "Invalid product: expected 'TBD' or letters and digits",
            pos,
        )

    return ProductId(manufacturer=manufacturer, product=product), pos
