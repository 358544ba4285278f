"""
Grammar engine for gpEID identifiers.

This package validates gpEID strings and decomposes them into typed models.

Public API:
    Models:
        - Identifier: A fully decomposed gpEID
        - TypeId: Type core plus 3-digit counter (_Sensor.001)
        - ProductId: Manufacturer/product pair (:Siemens.ABC123)
        - Extension: Free-form extension block (-Config.v1)

    Diagnostics:
        - Diagnostic: Positioned grammar message
        - DiagnosticCode: Every diagnostic the grammar can emit
        - ValidationResult: Outcome of validating one token
        - GrammarError: Raised by parse() for invalid tokens

    Parser functions:
        - validate: Validate a token, returning a ValidationResult
        - parse: Parse a token into an Identifier
        - is_valid: Check if a token is a valid gpEID

    Rendering:
        - describe: Labelled component strings
        - describe_markdown: Markdown breakdown for hover views

Example:
    >>> from gpeid.core.grammar import validate
    >>> result = validate("=Gebäude1+HLK_Sensor.001:Siemens.ABC123")
    >>> result.valid
    True
    >>> result.identifier.location
    ('Gebäude1',)
    >>> str(result.identifier.product)
    ':Siemens.ABC123'
"""

from gpeid.core.grammar.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    GrammarError,
    Severity,
    ValidationResult,
)
from gpeid.core.grammar.models import Extension, Identifier, ProductId, TypeId
from gpeid.core.grammar.parser import is_valid, parse, validate
from gpeid.core.grammar.render import describe, describe_markdown

__all__ = [
    # Models
    "Identifier",
    "TypeId",
    "ProductId",
    "Extension",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    "GrammarError",
    "Severity",
    "ValidationResult",
    # Parser functions
    "validate",
    "parse",
    "is_valid",
    # Rendering
    "describe",
    "describe_markdown",
]
