"""
Token builder - runs one load/transform/emit pass per theme.

Passes are independent: each reads its own files, builds its own token
dictionary and writes its own output file. Any exception aborts the
build; files written by earlier passes are left as they are.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from chuk_design_tokens.constants import ErrorMessages
from chuk_design_tokens.errors import ConfigError
from chuk_design_tokens.formats import format_css_variables
from chuk_design_tokens.loader import TokenLoader, discover_sets, load_manifest
from chuk_design_tokens.models.config import BuildConfig, PassConfig
from chuk_design_tokens.models.token import TokenDictionary
from chuk_design_tokens.transforms import TransformPipeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a single pass."""

    theme: str
    path: Path
    css: str
    token_count: int


class TokenBuilder:
    """
    Builds themed CSS from token files.

    The builder:
    - Works out which passes to run (configured themes or manifest sets)
    - Loads and merges each pass's include and source files
    - Applies the configured transforms
    - Renders the pass's source tokens and writes the stylesheet
    """

    def __init__(self, config: BuildConfig):
        """
        Initialize the builder.

        Args:
            config: Build configuration

        Raises:
            ConfigError: If the config names an unknown transform
        """
        self.config = config
        self.pipeline = TransformPipeline(config.transforms)
        self.loader = TokenLoader(config.tokens_dir)

    def theme_names(self) -> list[str]:
        """
        Names of the passes to run, in build order.

        With a manifest, these are its top-level sets (``$themes``
        excluded); otherwise the global pass followed by the configured
        themes.
        """
        if self.config.manifest:
            return discover_sets(load_manifest(self.config.manifest))
        return self.config.configured_names()

    def load_dictionary(self, pass_config: PassConfig) -> TokenDictionary:
        """Load, merge and transform the tokens visible to a pass."""
        tokens = self.loader.load(pass_config.source, pass_config.include)
        return TokenDictionary(self.pipeline.apply(token) for token in tokens)

    def render(self, pass_config: PassConfig) -> tuple[str, int]:
        """
        Render a pass to CSS without writing it.

        Returns:
            The CSS text and the number of tokens emitted
        """
        dictionary = self.load_dictionary(pass_config)
        selected = [t for t in dictionary if pass_config.accepts(t)]
        css = format_css_variables(
            selected,
            dictionary,
            selector=pass_config.selector,
            output_references=pass_config.output_references,
        )
        return css, len(selected)

    def build_theme(self, name: str) -> BuildResult:
        """
        Build and write one pass.

        Args:
            name: Theme or global set name

        Returns:
            BuildResult with the written path and CSS
        """
        pass_config = self.config.pass_for(name)
        css, count = self.render(pass_config)

        output_path = self.config.output_dir / pass_config.destination
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(css, encoding="utf-8")

        logger.info(f"Built {name}: {count} tokens -> {output_path}")
        return BuildResult(theme=name, path=output_path, css=css, token_count=count)

    def build_all(self, only: list[str] | None = None) -> list[BuildResult]:
        """
        Build every pass.

        Args:
            only: Restrict the build to these pass names

        Raises:
            ConfigError: If ``only`` names a pass that isn't available
        """
        names = self.theme_names()
        if only:
            for name in only:
                if name not in names:
                    raise ConfigError(ErrorMessages.UNKNOWN_THEME.format(name=name))
            names = [n for n in names if n in only]

        return [self.build_theme(name) for name in names]
