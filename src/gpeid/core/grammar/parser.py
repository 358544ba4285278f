"""
gpEID parser and validator.

Runs the five component grammars in order over a single token:

    =location +function _type :product [-$|]extensions

The cursor is passed explicitly from rule to rule, so the functions here hold
no state and can be called from any number of threads at once.

Public API:
    - validate: Validate a token and return diagnostics or the identifier
    - parse: Parse a token into an Identifier, raising GrammarError if invalid
    - is_valid: Check if a token is a valid gpEID
"""

import logging

from gpeid.core.grammar.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    GrammarError,
    ValidationResult,
)
from gpeid.core.grammar.extension import parse_extensions
from gpeid.core.grammar.function import parse_function
from gpeid.core.grammar.location import parse_location
from gpeid.core.grammar.models import Identifier
from gpeid.core.grammar.product import parse_product
from gpeid.core.grammar.type_id import parse_type

logger = logging.getLogger(__name__)


def _parse_identifier(token: str) -> tuple[Identifier, int]:
    location, pos = parse_location(token, 0)
    function, pos = parse_function(token, pos)
    type_id, pos = parse_type(token, pos)
    product, pos = parse_product(token, pos)
    extensions, pos = parse_extensions(token, pos)

    identifier = Identifier(
        location=location,
        function=function,
        type=type_id,
        product=product,
        extensions=extensions,
    )
    return identifier, pos


def validate(token: str) -> ValidationResult:
    """
    Validate a gpEID token.

    Any string is accepted. Parsing stops at the first component that
    fails; the result then carries every diagnostic raised up to that point
    and no identifier.

    Args:
        token: The candidate gpEID

    Returns:
        ValidationResult with the identifier when valid, diagnostics otherwise

    Examples:
        >>> result = validate("=Gebäude1+HLK_Sensor.001:Siemens.ABC123")
        >>> result.valid
        True
        >>> result.identifier.type.counter
        '001'
        >>> validate("=Building+HLK_Sensor.000:Vendor.Product").summary()
        "Counter cannot be '000', Invalid type counter: expected exactly 3 digits"
    """
    try:
        identifier, pos = _parse_identifier(token)
    except GrammarError as e:
        logger.debug(f"Rejected {token!r}: {e.code.value} at {e.offset}")
        return ValidationResult(token=token, valid=False, diagnostics=e.diagnostics)

    if pos < len(token):
        trailing = Diagnostic(
            code=DiagnosticCode.TRAILING_CHARACTERS,
            message=f"Unexpected characters after valid gpEID: '{token[pos:]}'",
            offset=pos,
            length=len(token) - pos,
        )
        logger.debug(f"Rejected {token!r}: trailing input at {pos}")
        return ValidationResult(token=token, valid=False, diagnostics=[trailing])

    return ValidationResult(token=token, valid=True, identifier=identifier)


def parse(token: str) -> Identifier:
    """
    Parse a gpEID token into its Identifier.

    Raises:
        GrammarError: If the token is invalid; carries all diagnostics

    Examples:
        >>> str(parse("=Haus+HLK_Sensor.001:Siemens.Model-Config.v1").extensions[0])
        '-Config.v1'
    """
    result = validate(token)
    if result.identifier is None:
        *preceding, last = result.diagnostics
        raise GrammarError(
            last.code,
            last.message,
            last.offset,
            length=last.length,
            preceding=preceding,
        )
    return result.identifier


def is_valid(token: str) -> bool:
    """Check if a token is a valid gpEID."""
    return validate(token).valid
