"""
Build orchestration - one CSS file per global or theme pass.
"""

from chuk_design_tokens.build.builder import BuildResult, TokenBuilder

__all__ = [
    "BuildResult",
    "TokenBuilder",
]
