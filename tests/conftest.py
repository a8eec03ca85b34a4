"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path

import pytest

GLOBAL_TOKENS = {
    "color": {
        "white": {"value": "#FFFFFF", "type": "color"},
        "black": {"value": "#000", "type": "color"},
        "red": {"value": "#FF0000", "type": "color"},
        "blue": {"500": {"value": "#3366cc", "type": "color"}},
    },
    "fontSize": {
        "body": {"value": "16", "type": "fontSizes"},
        "h1": {"value": "32", "type": "fontSizes"},
    },
    "space": {"1": {"value": "4", "type": "spacing"}},
    "radius": {"md": {"value": "8", "type": "borderRadius"}},
    "borderWidth": {"thin": {"value": "1", "type": "borderWidth"}},
    "lineHeight": {"tight": {"value": "125%", "type": "lineHeights"}},
    "opacity": {
        "medium": {"value": "50%", "type": "opacity"},
        "full": {"value": "100%", "type": "opacity"},
    },
    "fontWeight": {
        "regular": {"value": "Buch", "type": "fontWeights"},
        "bold": {"value": "Dreiviertelfett", "type": "fontWeights"},
    },
    "fontFamily": {
        "sans": {"value": "Söhne", "type": "fontFamilies"},
        "mono": {"value": "Söhne Mono", "type": "fontFamilies"},
    },
    "typography": {
        "body": {
            "value": {"fontFamily": "{fontFamily.sans}", "fontSize": "{fontSize.body}"},
            "type": "typography",
        },
    },
}

LIGHT_TOKENS = {
    "color": {
        "background": {"value": "{color.white}", "type": "color"},
        "text": {"value": "{color.black}", "type": "color"},
    },
    "opacity": {"overlay": {"value": "{opacity.medium}", "type": "opacity"}},
    "typography": {
        "heading": {
            "value": {"fontFamily": "{fontFamily.sans}", "fontWeight": "{fontWeight.bold}"},
            "type": "typography",
        },
    },
}

DARK_TOKENS = {
    "color": {
        "background": {"value": "{color.black}", "type": "color"},
        "text": {"value": "{color.white}", "type": "color"},
        "accent": {"value": "{color.missing}", "type": "color"},
    },
}


def _write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def write_json():
    """Helper that writes a dict as a UTF-8 JSON file."""
    return _write_json


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tokens_dir(temp_dir: Path) -> Path:
    """A tokens directory with global, light and dark sets."""
    directory = temp_dir / "tokens"
    _write_json(directory / "global.json", GLOBAL_TOKENS)
    _write_json(directory / "light.json", LIGHT_TOKENS)
    _write_json(directory / "dark.json", DARK_TOKENS)
    return directory


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    """Output directory for generated CSS (not created up front)."""
    return temp_dir / "output"
