"""
Token models - the in-memory token graph for one build pass.

Tokens are immutable. Transforms and reference resolution produce new
Token instances; nothing is mutated once a TokenDictionary exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field

from chuk_design_tokens.constants import REFERENCE_PATH_SEPARATOR, TokenType


class Token(BaseModel):
    """A single named design value."""

    path: tuple[str, ...] = Field(description="Keys from the JSON nesting, outermost first")
    name: str = Field(default="", description="CSS custom property name, without '--'")
    raw_value: Any = Field(description="Value as authored, possibly an alias expression")
    value: Any = Field(default=None, description="Value after the value transform")
    type: str | None = Field(default=None, description="Author-supplied token type")
    description: str | None = None
    is_source: bool = Field(
        default=True,
        description="True when authored in the pass's source files, not an included file",
    )
    attributes: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        """Dotted path, the form used inside alias braces."""
        return REFERENCE_PATH_SEPARATOR.join(self.path)

    @property
    def category(self) -> str | None:
        """CTI category, set by the attribute/cti transform."""
        return self.attributes.get("category")

    @property
    def is_color(self) -> bool:
        return self.type == TokenType.COLOR.value

    @property
    def is_typography(self) -> bool:
        return self.type == TokenType.TYPOGRAPHY.value


class TokenDictionary:
    """
    Ordered, read-only collection of the tokens merged for one pass.

    Lookups are by dotted path, the alias syntax.
    Iteration follows the merged source order.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._by_key: dict[str, Token] = {}
        for token in tokens:
            self._by_key[token.key] = token

    def __iter__(self) -> Iterator[Token]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Token | None:
        """Get a token by dotted path."""
        return self._by_key.get(key)

    def as_mapping(self) -> Mapping[str, Token]:
        """Read-only dotted path to token view, for the reference functions."""
        return MappingProxyType(self._by_key)
