"""
Token loader - reads token JSON into a merged, ordered token list.

A token is any mapping with a ``value`` key (``$value`` is accepted for
DTCG-style files); every other mapping is a group whose keys extend the
path. Included files are merged first and source files last, so a source
token overrides an included one with the same path while keeping the
included token's position.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from chuk_design_tokens.constants import THEMES_KEY, ErrorMessages
from chuk_design_tokens.errors import TokenSourceError
from chuk_design_tokens.models.token import Token

logger = logging.getLogger(__name__)

_VALUE_KEYS = ("value", "$value")
_TYPE_KEYS = ("type", "$type")
_DESCRIPTION_KEYS = ("description", "$description")


def read_json(path: Path) -> dict[str, Any]:
    """
    Read a JSON object from disk.

    Raises:
        TokenSourceError: If the file is missing, unreadable, not JSON, or not an object
    """
    if not path.exists():
        raise TokenSourceError(ErrorMessages.SOURCE_NOT_FOUND.format(path=path), path=path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TokenSourceError(
            ErrorMessages.SOURCE_INVALID_JSON.format(path=path, error=e), path=path
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TokenSourceError(
            ErrorMessages.SOURCE_UNREADABLE.format(path=path, error=e), path=path
        ) from e

    if not isinstance(data, dict):
        raise TokenSourceError(ErrorMessages.SOURCE_NOT_OBJECT.format(path=path), path=path)

    return data


def _first(data: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def is_token_node(node: Any) -> bool:
    return isinstance(node, dict) and any(key in node for key in _VALUE_KEYS)


def flatten_tokens(
    tree: dict[str, Any],
    is_source: bool = True,
    prefix: tuple[str, ...] = (),
) -> Iterator[Token]:
    """
    Walk a token tree and yield one Token per leaf, in source order.

    The raw value doubles as the initial value until a transform runs.
    """
    for key, node in tree.items():
        if key.startswith("$"):
            continue
        path = (*prefix, key)
        if is_token_node(node):
            raw_value = _first(node, _VALUE_KEYS)
            yield Token(
                path=path,
                raw_value=raw_value,
                value=raw_value,
                type=_first(node, _TYPE_KEYS),
                description=_first(node, _DESCRIPTION_KEYS),
                is_source=is_source,
            )
        elif isinstance(node, dict):
            yield from flatten_tokens(node, is_source=is_source, prefix=path)


class TokenLoader:
    """
    Loads token files relative to a tokens directory.

    Files are re-read on every call; one build pass reads each file
    once.
    """

    def __init__(self, tokens_dir: Path):
        """
        Initialize the loader.

        Args:
            tokens_dir: Directory that source/include names resolve against
        """
        self.tokens_dir = tokens_dir

    def resolve_path(self, name: str) -> Path:
        path = Path(name)
        return path if path.is_absolute() else self.tokens_dir / path

    def load_file(self, name: str, is_source: bool = True) -> list[Token]:
        """Load and flatten one token file."""
        path = self.resolve_path(name)
        tokens = list(flatten_tokens(read_json(path), is_source=is_source))
        logger.debug(f"Loaded {len(tokens)} tokens from {path}")
        return tokens

    def load(self, source: list[str], include: list[str] | None = None) -> list[Token]:
        """
        Load and merge include and source files.

        Args:
            source: Files whose tokens are marked as source
            include: Files merged in for reference resolution only

        Returns:
            Merged tokens in source order, one per path
        """
        merged: dict[tuple[str, ...], Token] = {}
        for name in include or []:
            for token in self.load_file(name, is_source=False):
                merged[token.path] = token
        for name in source:
            for token in self.load_file(name, is_source=True):
                merged[token.path] = token
        return list(merged.values())


def load_manifest(path: Path) -> dict[str, Any]:
    """Read a combined token manifest."""
    return read_json(path)


def discover_sets(manifest: dict[str, Any]) -> list[str]:
    """Token set names in a manifest, in file order, without ``$themes``."""
    return [key for key in manifest if key != THEMES_KEY]
