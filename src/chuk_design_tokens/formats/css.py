"""
CSS generator - renders tokens as custom properties in one rule block.

Colors get two declarations: the bare HSL components under ``-hsl`` and
the usable color built from them, so consumers can add opacity:

    .foo { color: var(--primary); }
    .bar { color: hsl(var(--primary-hsl), var(--opacity-medium)); }
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_design_tokens.constants import ROOT_SELECTOR
from chuk_design_tokens.models.token import Token, TokenDictionary
from chuk_design_tokens.references import get_references, resolve_value, uses_reference
from chuk_design_tokens.rendering import render_value

INDENT = "  "


def _has_value(token: Token) -> bool:
    return token.value is not None and token.value != ""


def generate_token_lines(
    token: Token,
    dictionary: TokenDictionary,
    output_references: bool = True,
) -> list[str]:
    """
    Declarations for a single token, without indentation.

    Args:
        token: Token to render
        dictionary: Full merged token graph, for alias lookups
        output_references: Emit var() for aliases instead of literal values

    Returns:
        Zero or more ``--name: value;`` strings
    """
    lines: list[str] = []
    name = f"{token.name}-hsl" if token.is_color else token.name
    lookup = dictionary.as_mapping()

    if uses_reference(token.raw_value):
        if output_references:
            for ref in get_references(token.raw_value, lookup):
                if _has_value(ref) and ref.name:
                    lines.append(f"--{name}: var(--{ref.name});")
        else:
            resolved = resolve_value(token.raw_value, lookup, (token.key,))
            lines.append(f"--{name}: {render_value(resolved)};")
    else:
        lines.append(f"--{name}: {render_value(token.value)};")

    if token.is_color:
        lines.append(f"--{token.name}: hsl(var(--{name}));")

    return lines


def format_css_variables(
    tokens: Iterable[Token],
    dictionary: TokenDictionary,
    selector: str | None = None,
    output_references: bool = True,
) -> str:
    """
    Render tokens as one CSS rule block.

    Args:
        tokens: Tokens to emit, already filtered, in output order
        dictionary: Full merged token graph, for alias lookups
        selector: Rule selector, ``:root`` when not given
        output_references: Emit var() for aliases instead of literal values

    Returns:
        ``selector {\\n  --a: ...;\\n}`` with no trailing newline
    """
    lines: list[str] = []
    for token in tokens:
        lines.extend(
            f"{INDENT}{line}"
            for line in generate_token_lines(token, dictionary, output_references)
        )

    return f"{selector or ROOT_SELECTOR} {{\n" + "\n".join(lines) + "\n}"
