"""
Set splitter - materializes per-set token files from a combined manifest.

The splitting itself is done by the external ``token-transformer``
utility; this module only invokes it once per set:

    <command> tokens.json tokens/<set>.json <set> --resolveReferences false
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from chuk_design_tokens.constants import ErrorMessages
from chuk_design_tokens.errors import SplitError
from chuk_design_tokens.loader import discover_sets, load_manifest

logger = logging.getLogger(__name__)


def split_command(command: str, manifest: Path, output: Path, set_name: str) -> list[str]:
    """Argument list for splitting one set."""
    return [
        *shlex.split(command),
        str(manifest),
        str(output),
        set_name,
        "--resolveReferences",
        "false",
    ]


def split_sets(
    manifest: Path,
    tokens_dir: Path,
    command: str,
    sets: list[str] | None = None,
) -> list[Path]:
    """
    Split a manifest into one token file per set.

    Args:
        manifest: Combined token file
        tokens_dir: Directory to write ``<set>.json`` files into
        command: Splitter executable, optionally with leading arguments
        sets: Set names to split; all manifest sets when omitted

    Returns:
        Paths of the written set files

    Raises:
        SplitError: If the command is missing or exits non-zero
    """
    names = sets if sets is not None else discover_sets(load_manifest(manifest))
    tokens_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name in names:
        output = tokens_dir / f"{name}.json"
        args = split_command(command, manifest, output, name)
        logger.debug(f"Running {shlex.join(args)}")

        try:
            subprocess.run(args, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise SplitError(
                ErrorMessages.SPLIT_COMMAND_NOT_FOUND.format(command=args[0]), command=args
            ) from e
        except subprocess.CalledProcessError as e:
            raise SplitError(
                ErrorMessages.SPLIT_FAILED.format(
                    name=name, status=e.returncode, stderr=(e.stderr or "").strip()
                ),
                command=args,
                returncode=e.returncode,
            ) from e

        logger.info(f"Split set {name} -> {output}")
        written.append(output)

    return written
