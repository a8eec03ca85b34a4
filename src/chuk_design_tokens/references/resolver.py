"""
Reference resolver - alias detection and expansion.

An alias is a dotted token path in braces, e.g. ``{color.blue.500}``.
Values may be a bare alias, a string with several aliases embedded
("{space.1} {space.2}"), or a composite mapping whose members contain
aliases. Everything here is a pure function over the raw value and a
dotted-path -> Token mapping.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

from chuk_design_tokens.constants import (
    REFERENCE_PATH_SEPARATOR,
    REFERENCE_PATTERN,
    ErrorMessages,
)
from chuk_design_tokens.errors import CircularReferenceError
from chuk_design_tokens.models.token import Token
from chuk_design_tokens.rendering import render_value

logger = logging.getLogger(__name__)

# Suffix some authoring tools append to alias paths
_VALUE_SUFFIX = REFERENCE_PATH_SEPARATOR + "value"


def _iter_strings(raw: Any) -> Iterator[str]:
    """Yield every string inside a value, depth first in source order."""
    if isinstance(raw, str):
        yield raw
    elif isinstance(raw, Mapping):
        for member in raw.values():
            yield from _iter_strings(member)
    elif isinstance(raw, list | tuple):
        for member in raw:
            yield from _iter_strings(member)


def reference_key(expression: str) -> str:
    """Normalize the text between braces to a dotted token path."""
    key = expression.strip()
    if key.endswith(_VALUE_SUFFIX):
        key = key[: -len(_VALUE_SUFFIX)]
    return key


def reference_keys(raw: Any) -> list[str]:
    """All alias paths in a value, in order of appearance."""
    return [
        reference_key(match.group(1))
        for text in _iter_strings(raw)
        for match in REFERENCE_PATTERN.finditer(text)
    ]


def uses_reference(raw: Any) -> bool:
    """Whether a raw value contains at least one alias."""
    return any(REFERENCE_PATTERN.search(text) for text in _iter_strings(raw))


def get_references(raw: Any, tokens: Mapping[str, Token]) -> list[Token]:
    """
    Tokens referenced directly by a raw value.

    Only one level of indirection: a referenced token that is itself an
    alias is returned as-is, not followed. Paths missing from ``tokens``
    are skipped.
    """
    references: list[Token] = []
    for key in reference_keys(raw):
        token = tokens.get(key)
        if token is None:
            logger.debug(f"Skipping unresolved reference {{{key}}}")
            continue
        references.append(token)
    return references


def resolve_value(
    raw: Any,
    tokens: Mapping[str, Token],
    _chain: tuple[str, ...] = (),
) -> Any:
    """
    Replace every alias in a value with the target's literal value.

    Chains are followed until a non-alias token is reached; its
    transformed value is used. A bare alias keeps the target value's
    type, embedded aliases are substituted as text. Unresolvable aliases
    are left in place.

    Raises:
        CircularReferenceError: If an alias chain loops
    """
    if isinstance(raw, Mapping):
        return {k: resolve_value(v, tokens, _chain) for k, v in raw.items()}
    if isinstance(raw, list | tuple):
        return [resolve_value(v, tokens, _chain) for v in raw]
    if not isinstance(raw, str) or not REFERENCE_PATTERN.search(raw):
        return raw

    whole = REFERENCE_PATTERN.fullmatch(raw.strip())
    if whole:
        return _resolve_key(reference_key(whole.group(1)), tokens, _chain, raw)

    def substitute(match: re.Match[str]) -> str:
        resolved = _resolve_key(reference_key(match.group(1)), tokens, _chain, match.group(0))
        return render_value(resolved)

    return REFERENCE_PATTERN.sub(substitute, raw)


def _resolve_key(
    key: str,
    tokens: Mapping[str, Token],
    chain: tuple[str, ...],
    fallback: str,
) -> Any:
    if key in chain:
        cycle = [*chain, key]
        raise CircularReferenceError(
            ErrorMessages.CIRCULAR_REFERENCE.format(chain=" -> ".join(cycle)),
            chain=cycle,
        )

    token = tokens.get(key)
    if token is None:
        logger.debug(f"Leaving unresolved reference {{{key}}} in place")
        return fallback

    if uses_reference(token.raw_value):
        return resolve_value(token.raw_value, tokens, (*chain, key))
    return token.value
