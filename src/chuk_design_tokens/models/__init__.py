"""
Pydantic models for the token pipeline.

This module provides:
- Token: A single design value with its path, type and transformed value
- TokenDictionary: The ordered token graph for one build pass
- BuildConfig: Directories, transforms and pass declarations
- PassConfig: Resolved settings for one global or theme pass
"""

from chuk_design_tokens.models.token import Token, TokenDictionary
from chuk_design_tokens.models.config import (
    BuildConfig,
    GlobalPassConfig,
    PassConfig,
    ThemeConfig,
    ThemeDefaults,
    load_config,
)

__all__ = [
    "BuildConfig",
    "GlobalPassConfig",
    "PassConfig",
    "ThemeConfig",
    "ThemeDefaults",
    "Token",
    "TokenDictionary",
    "load_config",
]
