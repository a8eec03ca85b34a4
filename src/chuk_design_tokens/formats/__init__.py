"""
Output formats for resolved tokens.
"""

from chuk_design_tokens.formats.css import (
    format_css_variables,
    generate_token_lines,
    render_value,
)

__all__ = [
    "format_css_variables",
    "generate_token_lines",
    "render_value",
]
