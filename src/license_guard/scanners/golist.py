"""Scanner running ``go list -deps -json`` in a Go module."""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from license_guard.errors import DependencyListError
from license_guard.models import Package
from license_guard.scanners.base import BaseScanner
from license_guard.scanners.json_stream import decode_package_stream

logger = logging.getLogger(__name__)


class GoListScanner(BaseScanner):
    """Scanner listing a module's packages and all their dependencies.

    Attributes:
        module_dir: Directory the go tool runs in (the current directory
            when None).
        patterns: Package patterns passed to ``go list``. Empty means the
            package in ``module_dir``.
        go_binary: Name or path of the go executable.
    """

    def __init__(
        self,
        module_dir: Optional[Path] = None,
        patterns: Sequence[str] = (),
        go_binary: str = "go",
    ) -> None:
        """Initialize the scanner.

        Args:
            module_dir: Directory to run ``go list`` in.
            patterns: Package patterns, e.g. ``["./..."]``.
            go_binary: Name or path of the go executable.
        """
        self.module_dir = module_dir
        self.patterns = list(patterns)
        self.go_binary = go_binary

    @property
    def source_name(self) -> str:
        """Return "go list"."""
        return "go list"

    @property
    def command(self) -> list[str]:
        """Return the command line that lists the dependencies."""
        return [self.go_binary, "list", "-deps", "-json", *self.patterns]

    def scan(self) -> list[Package]:
        """Run ``go list`` and decode its output.

        Returns:
            List of Package objects in the order ``go list`` reported them.

        Raises:
            DependencyListError: If the go tool is missing or fails.
        """
        location = self.module_dir or Path.cwd()
        logger.debug("Running %s in %s", " ".join(self.command), location)
        try:
            completed = subprocess.run(
                self.command,
                cwd=self.module_dir,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise DependencyListError(f"running {self.go_binary}: {e}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise DependencyListError(
                f"go list failed in {location} (exit {e.returncode}): {stderr}"
            ) from e

        return decode_package_stream(completed.stdout)
