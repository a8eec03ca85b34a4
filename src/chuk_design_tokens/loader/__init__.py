"""
Token loading - JSON token files and combined manifests.
"""

from chuk_design_tokens.loader.token_loader import (
    TokenLoader,
    discover_sets,
    flatten_tokens,
    load_manifest,
    read_json,
)

__all__ = [
    "TokenLoader",
    "discover_sets",
    "flatten_tokens",
    "load_manifest",
    "read_json",
]
