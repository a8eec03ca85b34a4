"""
Tests for the command-line entry point.
"""

from pathlib import Path

import pytest

from chuk_design_tokens.cli import build_parser, main


@pytest.fixture(autouse=True)
def work_dir(temp_dir: Path, monkeypatch):
    """Run every command from an empty directory with no default config."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


class TestParser:
    """Tests for argument parsing."""

    def test_options_before_command(self):
        args = build_parser().parse_args(["--tokens-dir", "t", "build", "--theme", "dark"])
        assert args.tokens_dir == Path("t")
        assert args.themes == ["dark"]

    def test_options_after_command(self):
        args = build_parser().parse_args(["build", "--output-dir", "css"])
        assert args.output_dir == Path("css")

    def test_no_command(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.debug is False


class TestBuildCommand:
    """Tests for ``build``."""

    def test_build_selected(self, tokens_dir: Path, output_dir: Path, work_dir: Path):
        (work_dir / "tokens.config.yaml").write_text("themes: [light, dark]\n", encoding="utf-8")
        code = main(["--output-dir", str(output_dir), "build"])
        assert code == 0
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "dark.css",
            "global.css",
            "light.css",
        ]

    def test_theme_filter(self, tokens_dir: Path, output_dir: Path):
        code = main(
            [
                "build",
                "--tokens-dir",
                str(tokens_dir),
                "--output-dir",
                str(output_dir),
                "--theme",
                "global",
            ]
        )
        assert code == 0
        assert [p.name for p in output_dir.iterdir()] == ["global.css"]

    def test_default_command_is_build(self, tokens_dir: Path, output_dir: Path, work_dir: Path):
        (work_dir / "tokens.config.yaml").write_text("themes: [light]\n", encoding="utf-8")
        assert main(["--output-dir", str(output_dir)]) == 0
        assert (output_dir / "light.css").exists()

    def test_missing_tokens_fail(self, temp_dir: Path, output_dir: Path):
        code = main(["--tokens-dir", str(temp_dir / "missing"), "--output-dir", str(output_dir)])
        assert code == 1

    def test_unreadable_tokens_fail(self, temp_dir: Path, output_dir: Path):
        tokens = temp_dir / "tokens"
        (tokens / "global.json").mkdir(parents=True)
        code = main(["--tokens-dir", str(tokens), "--output-dir", str(output_dir), "build"])
        assert code == 1

    def test_missing_config_fails(self, temp_dir: Path):
        assert main(["--config", str(temp_dir / "absent.yaml"), "build"]) == 1


class TestThemesCommand:
    """Tests for ``themes``."""

    def test_lists_defaults(self, capsys):
        assert main(["themes"]) == 0
        assert capsys.readouterr().out.split() == ["global", "light", "dark", "yellow"]

    def test_lists_manifest_sets(self, temp_dir: Path, write_json, capsys):
        manifest = write_json(
            temp_dir / "tokens.json", {"global": {}, "brand": {}, "$themes": []}
        )
        assert main(["themes", "--manifest", str(manifest)]) == 0
        assert capsys.readouterr().out.split() == ["global", "brand"]


class TestSplitCommand:
    """Tests for ``split``."""

    def test_requires_manifest(self):
        assert main(["split"]) == 1
