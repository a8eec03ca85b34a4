"""
Build configuration models.

A build is described by a YAML file (or the defaults below, which
reproduce the stock light/dark/yellow build). Theme passes are
declared by name and filled in from ``theme_defaults``; ``{theme}`` in
any theme string is replaced with the theme name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chuk_design_tokens.constants import (
    DEFAULT_SPLIT_COMMAND,
    DEFAULT_TRANSFORMS,
    GLOBAL_SET,
    ROOT_SELECTOR,
    ErrorMessages,
    TokenType,
)
from chuk_design_tokens.errors import ConfigError
from chuk_design_tokens.models.token import Token

THEME_PLACEHOLDER = "{theme}"


class PassConfig(BaseModel):
    """Fully resolved settings for a single build pass."""

    name: str
    source: list[str] = Field(description="Token files whose tokens are emitted")
    include: list[str] = Field(
        default_factory=list,
        description="Token files merged in for reference resolution only",
    )
    destination: str = Field(description="Output file name under the output directory")
    selector: str | None = Field(default=None, description="Rule selector, ':root' if unset")
    output_references: bool = Field(
        default=True,
        description="Emit var() indirections for aliases instead of literal values",
    )
    exclude_types: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    def accepts(self, token: Token) -> bool:
        """Whether a token belongs in this pass's output."""
        return token.is_source and token.type not in self.exclude_types


class GlobalPassConfig(BaseModel):
    """The base pass emitted under :root."""

    name: str = GLOBAL_SET
    source: list[str] = Field(default_factory=lambda: [f"{GLOBAL_SET}.json"])
    include: list[str] = Field(default_factory=list)
    destination: str = f"{GLOBAL_SET}.css"
    selector: str = ROOT_SELECTOR
    output_references: bool = True
    exclude_types: list[str] = Field(default_factory=lambda: [TokenType.TYPOGRAPHY.value])

    def to_pass(self) -> PassConfig:
        return PassConfig(**self.model_dump())


class ThemeDefaults(BaseModel):
    """Templates applied to every theme pass that doesn't override them."""

    source: list[str] = Field(default_factory=lambda: [f"{THEME_PLACEHOLDER}.json"])
    include: list[str] = Field(default_factory=lambda: [f"{GLOBAL_SET}.json"])
    destination: str = f"{THEME_PLACEHOLDER}.css"
    selector: str = f'[data-theme="{THEME_PLACEHOLDER}"]'
    output_references: bool = True
    exclude_types: list[str] = Field(default_factory=list)


class ThemeConfig(BaseModel):
    """A theme pass. Unset fields come from ThemeDefaults."""

    name: str
    source: list[str] | None = None
    include: list[str] | None = None
    destination: str | None = None
    selector: str | None = None
    output_references: bool | None = None
    exclude_types: list[str] | None = None

    def to_pass(self, defaults: ThemeDefaults) -> PassConfig:
        merged: dict[str, Any] = defaults.model_dump()
        merged.update(self.model_dump(exclude_none=True))

        def fill(text: str) -> str:
            return text.replace(THEME_PLACEHOLDER, self.name)

        return PassConfig(
            name=self.name,
            source=[fill(s) for s in merged["source"]],
            include=[fill(s) for s in merged["include"]],
            destination=fill(merged["destination"]),
            selector=fill(merged["selector"]) if merged["selector"] else None,
            output_references=merged["output_references"],
            exclude_types=merged["exclude_types"],
        )


class BuildConfig(BaseModel):
    """Everything needed to run a build."""

    tokens_dir: Path = Field(default=Path("tokens"), description="Directory of token JSON files")
    output_dir: Path = Field(default=Path("output"), description="Directory for generated CSS")
    manifest: Path | None = Field(
        default=None,
        description="Combined token file; its top-level keys become the pass names",
    )
    transforms: list[str] = Field(default_factory=lambda: list(DEFAULT_TRANSFORMS))
    global_pass: GlobalPassConfig | None = Field(
        default_factory=GlobalPassConfig,
        alias="global",
    )
    theme_defaults: ThemeDefaults = Field(default_factory=ThemeDefaults)
    themes: list[ThemeConfig] = Field(
        default_factory=lambda: [ThemeConfig(name=n) for n in ("light", "dark", "yellow")]
    )
    split_command: str = DEFAULT_SPLIT_COMMAND

    model_config = {"populate_by_name": True}

    @field_validator("themes", mode="before")
    @classmethod
    def coerce_theme_names(cls, v: Any) -> Any:
        """Allow plain theme names in place of full theme mappings."""
        if isinstance(v, list):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    def configured_names(self) -> list[str]:
        """Pass names in build order when no manifest is used."""
        names = [self.global_pass.name] if self.global_pass else []
        names.extend(t.name for t in self.themes if t.name not in names)
        return names

    def get_theme(self, name: str) -> ThemeConfig | None:
        for theme in self.themes:
            if theme.name == name:
                return theme
        return None

    def pass_for(self, name: str) -> PassConfig:
        """
        Resolve the settings for a named pass.

        The global set gets the base pass; any other name is a theme,
        using its declared overrides when it has any.
        """
        if self.global_pass and name == self.global_pass.name:
            return self.global_pass.to_pass()
        theme = self.get_theme(name) or ThemeConfig(name=name)
        return theme.to_pass(self.theme_defaults)

    def relative_to(self, base: Path) -> BuildConfig:
        """Anchor relative directories at ``base``."""

        def anchor(path: Path) -> Path:
            return path if path.is_absolute() else base / path

        return self.model_copy(
            update={
                "tokens_dir": anchor(self.tokens_dir),
                "output_dir": anchor(self.output_dir),
                "manifest": anchor(self.manifest) if self.manifest else None,
            }
        )


def load_config(path: Path | None = None) -> BuildConfig:
    """
    Load a build config from YAML.

    Relative paths inside the file are taken relative to the file's
    directory. With no path, the defaults are returned unchanged.

    Raises:
        ConfigError: If the file is missing, not YAML, or fails validation
    """
    if path is None:
        return BuildConfig()

    if not path.exists():
        raise ConfigError(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(ErrorMessages.CONFIG_INVALID.format(path=path, error=e)) from e

    if not isinstance(data, dict):
        raise ConfigError(
            ErrorMessages.CONFIG_INVALID.format(path=path, error="expected a mapping")
        )

    try:
        config = BuildConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(ErrorMessages.CONFIG_INVALID.format(path=path, error=e)) from e

    return config.relative_to(path.parent)
