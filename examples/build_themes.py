#!/usr/bin/env python3
"""
Example: Building Themed Stylesheets.

This builds the example token set into one stylesheet per theme and
shows how color tokens come out as HSL channels plus an hsl() wrapper,
so a theme can swap colors while keeping alpha composition working.

Usage:
    python examples/build_themes.py
"""

import tempfile
from pathlib import Path

from chuk_design_tokens import TokenBuilder, load_config


def main() -> None:
    """Build the example themes into a temporary directory."""
    print("CHUK Design Tokens Demo")
    print("=" * 40)
    print()

    config = load_config(Path(__file__).parent / "tokens.config.yaml")

    with tempfile.TemporaryDirectory() as tmp:
        config = config.model_copy(update={"output_dir": Path(tmp)})
        builder = TokenBuilder(config)

        print(f"Passes: {', '.join(builder.theme_names())}")
        print()

        for result in builder.build_all():
            print(f"{result.path.name} ({result.token_count} tokens)")
            print("-" * 40)
            print(result.css)
            print()

    # Alpha composition works because the channels are exposed separately
    print("Usage in a stylesheet:")
    print("  .overlay { background: hsl(var(--color-background-hsl) / 0.8); }")


if __name__ == "__main__":
    main()
