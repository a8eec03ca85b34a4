"""
Tests for the build orchestrator.

Tests cover:
- Global pass output (selector, transforms, typography exclusion)
- Theme passes (source-only filtering, var() indirection)
- Manifest-driven pass discovery
- Idempotent output and fatal missing sources
"""

from pathlib import Path

import pytest

from chuk_design_tokens.build import TokenBuilder
from chuk_design_tokens.constants import FONT_STACKS
from chuk_design_tokens.errors import ConfigError, TokenSourceError
from chuk_design_tokens.models.config import BuildConfig, GlobalPassConfig, ThemeConfig

EXPECTED_GLOBAL = "\n".join(
    [
        ":root {",
        "  --color-white-hsl: 0,0%,100%;",
        "  --color-white: hsl(var(--color-white-hsl));",
        "  --color-black-hsl: 0,0%,0%;",
        "  --color-black: hsl(var(--color-black-hsl));",
        "  --color-red-hsl: 0,100%,50%;",
        "  --color-red: hsl(var(--color-red-hsl));",
        "  --color-blue-500-hsl: 220,60%,50%;",
        "  --color-blue-500: hsl(var(--color-blue-500-hsl));",
        "  --font-size-body: 1rem;",
        "  --font-size-h-1: 2rem;",
        "  --space-1: 0.25rem;",
        "  --radius-md: 8px;",
        "  --border-width-thin: 1px;",
        "  --line-height-tight: 1.25;",
        "  --opacity-medium: 0.5;",
        "  --opacity-full: 1;",
        "  --font-weight-regular: 400;",
        "  --font-weight-bold: 700;",
        f"  --font-family-sans: 'Söhne', {FONT_STACKS['font-family-sans']};",
        f"  --font-family-mono: 'Söhne Mono', {FONT_STACKS['font-family-mono']};",
        "}",
    ]
)

EXPECTED_LIGHT = "\n".join(
    [
        '[data-theme="light"] {',
        "  --color-background-hsl: var(--color-white);",
        "  --color-background: hsl(var(--color-background-hsl));",
        "  --color-text-hsl: var(--color-black);",
        "  --color-text: hsl(var(--color-text-hsl));",
        "  --opacity-overlay: var(--opacity-medium);",
        "  --typography-heading: var(--font-family-sans);",
        "  --typography-heading: var(--font-weight-bold);",
        "}",
    ]
)


@pytest.fixture
def config(tokens_dir: Path, output_dir: Path) -> BuildConfig:
    return BuildConfig(
        tokens_dir=tokens_dir,
        output_dir=output_dir,
        themes=[ThemeConfig(name="light"), ThemeConfig(name="dark")],
    )


class TestGlobalPass:
    """Tests for the :root pass."""

    def test_output(self, config: BuildConfig):
        result = TokenBuilder(config).build_theme("global")
        assert result.css == EXPECTED_GLOBAL
        assert result.path == config.output_dir / "global.css"
        assert result.path.read_text(encoding="utf-8") == EXPECTED_GLOBAL

    def test_typography_excluded(self, config: BuildConfig):
        result = TokenBuilder(config).build_theme("global")
        assert "typography" not in result.css

    def test_token_count(self, config: BuildConfig):
        result = TokenBuilder(config).build_theme("global")
        assert result.token_count == 16

    def test_typography_kept_when_not_excluded(self, config: BuildConfig):
        config = config.model_copy(update={"global_pass": GlobalPassConfig(exclude_types=[])})
        result = TokenBuilder(config).build_theme("global")
        assert "  --typography-body: var(--font-family-sans);" in result.css
        assert "  --typography-body: var(--font-size-body);" in result.css


class TestThemePasses:
    """Tests for theme passes merged over the global set."""

    def test_light_output(self, config: BuildConfig):
        result = TokenBuilder(config).build_theme("light")
        assert result.css == EXPECTED_LIGHT
        assert result.path.name == "light.css"

    def test_only_source_tokens(self, config: BuildConfig):
        css = TokenBuilder(config).build_theme("light").css
        assert "--color-white-hsl:" not in css
        assert "--space-1:" not in css

    def test_missing_reference_skipped(self, config: BuildConfig):
        css = TokenBuilder(config).build_theme("dark").css
        assert "--color-accent-hsl:" not in css
        assert "  --color-accent: hsl(var(--color-accent-hsl));" in css

    def test_literal_values(self, config: BuildConfig):
        config = config.model_copy(
            update={"themes": [ThemeConfig(name="light", output_references=False)]}
        )
        css = TokenBuilder(config).build_theme("light").css
        assert "  --color-background-hsl: 0,0%,100%;" in css
        assert "  --opacity-overlay: 0.5;" in css

    def test_selector_template(self, config: BuildConfig):
        defaults = config.theme_defaults.model_copy(
            update={"selector": '[data-theme="{theme}"], .{theme}-theme'}
        )
        config = config.model_copy(update={"theme_defaults": defaults})
        css = TokenBuilder(config).build_theme("dark").css
        assert css.startswith('[data-theme="dark"], .dark-theme {\n')

    def test_unconfigured_theme_uses_defaults(self, config: BuildConfig, write_json):
        write_json(
            config.tokens_dir / "yellow.json",
            {"color": {"background": {"value": "#ff0", "type": "color"}}},
        )
        result = TokenBuilder(config).build_theme("yellow")
        assert result.css == "\n".join(
            [
                '[data-theme="yellow"] {',
                "  --color-background-hsl: 60,100%,50%;",
                "  --color-background: hsl(var(--color-background-hsl));",
                "}",
            ]
        )


class TestBuildAll:
    """Tests for running every pass."""

    def test_writes_every_file(self, config: BuildConfig):
        results = TokenBuilder(config).build_all()
        assert [r.theme for r in results] == ["global", "light", "dark"]
        assert sorted(p.name for p in config.output_dir.iterdir()) == [
            "dark.css",
            "global.css",
            "light.css",
        ]

    def test_only(self, config: BuildConfig):
        results = TokenBuilder(config).build_all(only=["dark"])
        assert [r.theme for r in results] == ["dark"]

    def test_only_unknown(self, config: BuildConfig):
        with pytest.raises(ConfigError, match="sepia"):
            TokenBuilder(config).build_all(only=["sepia"])

    def test_without_global_pass(self, config: BuildConfig):
        config = config.model_copy(update={"global_pass": None})
        results = TokenBuilder(config).build_all()
        assert [r.theme for r in results] == ["light", "dark"]

    def test_idempotent(self, config: BuildConfig):
        builder = TokenBuilder(config)
        first = {r.path: r.path.read_bytes() for r in builder.build_all()}
        second = {r.path: r.path.read_bytes() for r in builder.build_all()}
        assert first == second

    def test_missing_theme_file_is_fatal(self, config: BuildConfig):
        config = config.model_copy(update={"themes": [ThemeConfig(name="sepia")]})
        with pytest.raises(TokenSourceError, match="sepia.json"):
            TokenBuilder(config).build_all()

    def test_unknown_transform(self, config: BuildConfig):
        config = config.model_copy(update={"transforms": ["attribute/cti", "color/hex"]})
        with pytest.raises(ConfigError):
            TokenBuilder(config)


class TestManifestDiscovery:
    """Tests for passes discovered from a combined manifest."""

    def test_theme_names(self, config: BuildConfig, write_json):
        manifest = write_json(
            config.tokens_dir.parent / "tokens.json",
            {"global": {}, "light": {}, "$themes": [{"name": "Light"}]},
        )
        config = config.model_copy(update={"manifest": manifest})
        assert TokenBuilder(config).theme_names() == ["global", "light"]

    def test_builds_discovered_sets(self, config: BuildConfig, write_json):
        manifest = write_json(
            config.tokens_dir.parent / "tokens.json",
            {"global": {}, "dark": {}, "$themes": []},
        )
        config = config.model_copy(update={"manifest": manifest})
        results = TokenBuilder(config).build_all()
        assert [r.path.name for r in results] == ["global.css", "dark.css"]
        assert results[0].css == EXPECTED_GLOBAL
