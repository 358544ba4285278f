"""
gpeid - gpEID identifier validator

Validates and decomposes gpEID asset identifiers
(=location+function_type.counter:manufacturer.product[-$|]extensions).
"""

__version__ = "0.1.0"

# Re-export the grammar entry points for convenience
from gpeid.core.grammar import Identifier, ValidationResult, is_valid, parse, validate

__all__ = ["Identifier", "ValidationResult", "is_valid", "parse", "validate", "__version__"]
