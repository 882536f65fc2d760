"""Dependency scanners for Go modules.

This module provides scanners for producing the package list of a Go
module, either live from the go tool or from its saved output.
"""

from pathlib import Path
from typing import Optional

from license_guard.scanners.base import BaseScanner
from license_guard.scanners.golist import GoListScanner
from license_guard.scanners.json_stream import JsonStreamScanner, decode_package_stream

__all__ = [
    "BaseScanner",
    "GoListScanner",
    "JsonStreamScanner",
    "decode_package_stream",
    "get_scanner",
]


def get_scanner(
    input_path: Optional[Path] = None,
    module_dir: Optional[Path] = None,
) -> BaseScanner:
    """Get the appropriate scanner for the given inputs.

    Args:
        input_path: Path to saved ``go list -deps -json`` output. Takes
            precedence over ``module_dir``.
        module_dir: Go module directory to run ``go list`` in.

    Returns:
        Scanner instance configured for the inputs.
    """
    if input_path is not None:
        return JsonStreamScanner(input_path)
    return GoListScanner(module_dir=module_dir)
