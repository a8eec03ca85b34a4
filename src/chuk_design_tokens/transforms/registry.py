"""
Transform registry - named (matcher, transformer) rules.

A build lists transforms by name. Attribute and name transforms run in
list order on every token. Value transforms are tried in list order and
the first whose matcher accepts the token wins; tokens whose value is an
alias are left untransformed so they pick up their target's value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from chuk_design_tokens.constants import (
    CTI_ATTRIBUTES,
    FONT_STACKS,
    ErrorMessages,
    TokenCategory,
    TransformKind,
)
from chuk_design_tokens.errors import ConfigError
from chuk_design_tokens.models.token import Token
from chuk_design_tokens.references import uses_reference
from chuk_design_tokens.transforms import values

_LOWER = r"[^\W\d_A-Z]"
_WORD = re.compile(rf"[A-Z]+(?!{_LOWER})|[A-Z]?{_LOWER}+|\d+")


@dataclass(frozen=True)
class Transform:
    """A named transform and the tokens it applies to."""

    name: str
    kind: TransformKind
    transformer: Callable[[Token], Any]
    matcher: Callable[[Token], bool] | None = None

    def matches(self, token: Token) -> bool:
        return self.matcher is None or self.matcher(token)


def kebab_case(parts: Iterable[str]) -> str:
    """
    Join path segments into a kebab-case name.

    Camel humps and letter/digit boundaries start new words:
    ["fontSize", "h1"] -> "font-size-h-1".
    """
    words: list[str] = []
    for part in parts:
        words.extend(_WORD.findall(str(part)))
    return "-".join(w.lower() for w in words)


def _in_categories(*categories: TokenCategory) -> Callable[[Token], bool]:
    names = {c.value for c in categories}
    return lambda token: token.category in names


def _cti_attributes(token: Token) -> dict[str, str]:
    attributes = dict(zip(CTI_ATTRIBUTES, token.path, strict=False))
    attributes.update(token.attributes)
    return attributes


def _is_font_role(token: Token) -> bool:
    return token.category == TokenCategory.FONT_FAMILY.value and token.name in FONT_STACKS


_BUILTIN = [
    Transform(
        name="attribute/cti",
        kind=TransformKind.ATTRIBUTE,
        transformer=_cti_attributes,
    ),
    Transform(
        name="name/cti/kebab",
        kind=TransformKind.NAME,
        transformer=lambda token: kebab_case(token.path),
    ),
    Transform(
        name="color/customHSL",
        kind=TransformKind.VALUE,
        matcher=_in_categories(TokenCategory.COLOR),
        transformer=lambda token: values.color_to_hsl(token.raw_value),
    ),
    Transform(
        name="sizes/rem",
        kind=TransformKind.VALUE,
        matcher=_in_categories(TokenCategory.FONT_SIZE, TokenCategory.SPACE),
        transformer=lambda token: values.px_to_rem(token.raw_value),
    ),
    Transform(
        name="sizes/px",
        kind=TransformKind.VALUE,
        matcher=_in_categories(TokenCategory.RADIUS, TokenCategory.BORDER_WIDTH),
        transformer=lambda token: values.to_px(token.raw_value),
    ),
    Transform(
        name="sizes/percentage-to-decimal",
        kind=TransformKind.VALUE,
        matcher=_in_categories(TokenCategory.LINE_HEIGHT, TokenCategory.OPACITY),
        transformer=lambda token: values.percentage_to_decimal(token.raw_value),
    ),
    Transform(
        name="fonts/sohne-weights",
        kind=TransformKind.VALUE,
        matcher=_in_categories(TokenCategory.FONT_WEIGHT),
        transformer=lambda token: values.font_weight(token.raw_value),
    ),
    Transform(
        name="fonts/system-stack",
        kind=TransformKind.VALUE,
        matcher=_is_font_role,
        transformer=lambda token: values.font_stack(token.name, token.raw_value),
    ),
]

TRANSFORMS: dict[str, Transform] = {t.name: t for t in _BUILTIN}


def get_transform(name: str) -> Transform:
    """
    Look up a registered transform.

    Raises:
        ConfigError: If no transform has that name
    """
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise ConfigError(
            ErrorMessages.UNKNOWN_TRANSFORM.format(name=name, available=", ".join(TRANSFORMS))
        ) from None


class TransformPipeline:
    """An ordered selection of transforms applied to every loaded token."""

    def __init__(self, names: Iterable[str]):
        self.transforms = [get_transform(name) for name in names]

    @property
    def names(self) -> list[str]:
        return [t.name for t in self.transforms]

    def apply(self, token: Token) -> Token:
        """Return a transformed copy of a token."""
        value_done = uses_reference(token.raw_value)
        for transform in self.transforms:
            if transform.kind == TransformKind.ATTRIBUTE:
                token = token.model_copy(update={"attributes": transform.transformer(token)})
            elif transform.kind == TransformKind.NAME:
                token = token.model_copy(update={"name": transform.transformer(token)})
            elif not value_done and transform.matches(token):
                token = token.model_copy(update={"value": transform.transformer(token)})
                value_done = True
        return token
