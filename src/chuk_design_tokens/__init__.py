"""
CHUK Design Tokens - themed CSS custom properties from design-token JSON.

Token files are loaded and merged per theme, run through an ordered set
of value transforms (HSL colors, rem/px sizes, decimal percentages, font
weights and stacks), and written as one ``selector { --name: value; }``
block per theme. Aliases between tokens become ``var()`` indirections.
"""

from chuk_design_tokens.build import BuildResult, TokenBuilder
from chuk_design_tokens.errors import (
    CircularReferenceError,
    ConfigError,
    SplitError,
    TokenSourceError,
)
from chuk_design_tokens.formats import format_css_variables
from chuk_design_tokens.models import BuildConfig, PassConfig, Token, TokenDictionary, load_config

__version__ = "0.1.0"

__all__ = [
    "BuildConfig",
    "BuildResult",
    "CircularReferenceError",
    "ConfigError",
    "PassConfig",
    "SplitError",
    "Token",
    "TokenBuilder",
    "TokenDictionary",
    "TokenSourceError",
    "format_css_variables",
    "load_config",
]
