"""
Alias handling - detect, list and expand ``{path.to.token}`` references.
"""

from chuk_design_tokens.references.resolver import (
    get_references,
    reference_key,
    reference_keys,
    resolve_value,
    uses_reference,
)

__all__ = [
    "get_references",
    "reference_key",
    "reference_keys",
    "resolve_value",
    "uses_reference",
]
