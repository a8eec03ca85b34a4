#!/usr/bin/env python3
"""
Entry point for the design token build.

Commands:
- build: write one CSS file per global/theme pass (default)
- themes: list the passes a build would run
- split: materialize per-set token files from a combined manifest
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from chuk_design_tokens.build import TokenBuilder
from chuk_design_tokens.constants import ErrorMessages
from chuk_design_tokens.errors import ConfigError, SplitError
from chuk_design_tokens.models.config import BuildConfig, load_config
from chuk_design_tokens.splitter import split_sets

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("tokens.config.yaml")


def _common_options(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    # Subcommands suppress defaults so options given before the command survive
    common = argparse.ArgumentParser(
        add_help=False,
        argument_default=argparse.SUPPRESS if suppress_defaults else None,
    )
    common.add_argument(
        "--config",
        type=Path,
        help=f"Build config YAML (default: {DEFAULT_CONFIG_FILE} if present)",
    )
    common.add_argument("--tokens-dir", type=Path, help="Directory of token JSON files")
    common.add_argument("--output-dir", type=Path, help="Directory for generated CSS")
    common.add_argument("--manifest", type=Path, help="Combined token file to discover sets from")
    common.add_argument("--debug", action="store_true", help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build themed CSS custom properties from design tokens",
        parents=[_common_options()],
    )
    subparsers = parser.add_subparsers(dest="command")
    sub_common = _common_options(suppress_defaults=True)

    build = subparsers.add_parser("build", parents=[sub_common], help="Build CSS files")
    build.add_argument(
        "--theme",
        action="append",
        dest="themes",
        help="Only build this pass (repeatable)",
    )

    subparsers.add_parser("themes", parents=[sub_common], help="List build passes")

    split = subparsers.add_parser("split", parents=[sub_common], help="Split a manifest into sets")
    split.add_argument(
        "--set",
        action="append",
        dest="sets",
        help="Only split this set (repeatable)",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> BuildConfig:
    """Load the config file and apply command-line overrides."""
    config_path = args.config
    if config_path is None and DEFAULT_CONFIG_FILE.exists():
        config_path = DEFAULT_CONFIG_FILE

    config = load_config(config_path)

    overrides = {
        "tokens_dir": args.tokens_dir,
        "output_dir": args.output_dir,
        "manifest": args.manifest,
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def run_build(config: BuildConfig, themes: list[str] | None) -> int:
    results = TokenBuilder(config).build_all(only=themes)
    logger.info(f"Wrote {len(results)} stylesheet(s) to {config.output_dir}")
    return 0


def run_themes(config: BuildConfig) -> int:
    for name in TokenBuilder(config).theme_names():
        print(name)
    return 0


def run_split(config: BuildConfig, sets: list[str] | None) -> int:
    if not config.manifest:
        raise ConfigError(ErrorMessages.NO_MANIFEST)
    written = split_sets(config.manifest, config.tokens_dir, config.split_command, sets)
    logger.info(f"Split {len(written)} set(s) into {config.tokens_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = resolve_config(args)
        if args.command == "themes":
            return run_themes(config)
        if args.command == "split":
            return run_split(config, args.sets)
        return run_build(config, getattr(args, "themes", None))
    except (ValueError, SplitError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
