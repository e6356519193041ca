"""
Utilities for working with CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional


def run_cli(root: Path, *args: str, stdin: Optional[str] = None) -> subprocess.CompletedProcess:
    """
    Runs estring.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for estring.cli
        stdin: Text passed to the process standard input

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    # the package is imported from the project root, not from the temporary cwd
    project_root = str(Path(__file__).resolve().parents[2])
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [project_root, env.get("PYTHONPATH")]))
    env.pop("ESTRING_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "estring.cli", *args],
        cwd=root, env=env, input=stdin, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """Parses CLI JSON output."""
    return json.loads(s)


__all__ = ["run_cli", "jload"]
