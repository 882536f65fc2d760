"""Base interface for output reporters.

Reporters generate formatted output (plain text, Markdown, ...) from the
checked package registry.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from license_guard.models import CheckResult, PackageRegistry


class BaseReporter(ABC):
    """Abstract base class for output reporters."""

    @abstractmethod
    def render(
        self,
        registry: PackageRegistry,
        result: CheckResult,
        licenses: Optional[dict[str, Optional[str]]] = None,
    ) -> str:
        """Render the outcome of a run to formatted output.

        Args:
            registry: All scanned packages.
            result: Outcome of the compatibility check.
            licenses: Optional mapping of package key to resolved license
                (None when unresolved), as returned by
                ``WaterfallResolver.resolve_all``.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(
        self,
        registry: PackageRegistry,
        result: CheckResult,
        output_path: Path,
        licenses: Optional[dict[str, Optional[str]]] = None,
    ) -> None:
        """Render and write output to a file.

        Args:
            registry: All scanned packages.
            result: Outcome of the compatibility check.
            output_path: Path to write the output file.
            licenses: Optional mapping of package key to resolved license.
        """
        content = self.render(registry, result, licenses)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name.

        Returns:
            Format name like "text", "markdown", etc.
        """
        ...
