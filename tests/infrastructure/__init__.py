"""
Unified test infrastructure for estring.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the estring CLI in a subprocess
"""

from .file_utils import write
from .cli_utils import run_cli, jload

__all__ = [
    # File utilities
    "write",
    # CLI utilities
    "run_cli",
    "jload",
]
