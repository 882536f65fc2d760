"""Plain-text reporter listing license violations.

Each violating package gets one paragraph::

    MIT licensed package example.com/app using packages:
      imports example.com/agpl/lib (AGPL-3.0-only)
"""

from typing import Optional

from license_guard.models import CheckResult, PackageRegistry
from license_guard.reporters.base import BaseReporter


class TextReporter(BaseReporter):
    """Reporter producing one plain-text paragraph per violating package."""

    def render(
        self,
        registry: PackageRegistry,
        result: CheckResult,
        licenses: Optional[dict[str, Optional[str]]] = None,
    ) -> str:
        """Render the violations as plain text.

        Args:
            registry: All scanned packages (unused).
            result: Outcome of the compatibility check.
            licenses: Unused.

        Returns:
            The paragraphs, or an empty string when there are no violations.
        """
        lines: list[str] = []
        for violation in result.violations:
            lines.append(
                f"{violation.license} licensed package {violation.key} using packages:"
            )
            for flagged in violation.imports:
                lines.append(f"  imports {flagged.key} ({flagged.license})")
        return "\n".join(lines) + "\n" if lines else ""

    @property
    def format_name(self) -> str:
        """Return the output format name.

        Returns:
            The string "text".
        """
        return "text"
