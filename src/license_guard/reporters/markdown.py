"""Markdown reporter for license inventories.

This module provides a reporter that renders every package's resolved
license, together with any violations, to a Markdown document using
Jinja2 templates.
"""

from datetime import datetime
from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from license_guard.models import CheckResult, PackageRegistry
from license_guard.reporters.base import BaseReporter


class MarkdownReporter(BaseReporter):
    """Reporter that generates a Markdown license inventory.

    The template receives ``packages`` (a list of dicts with ``key``,
    ``license``, ``kind`` and ``imported_by``), ``violations``,
    ``unresolved`` and ``generated_at``.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the Markdown reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
        """
        if template_path:
            env = Environment(
                loader=FileSystemLoader(template_path.parent),
                autoescape=True,
            )
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        """Load the default bundled Jinja2 template.

        Returns:
            The default template loaded from package resources.
        """
        template_content = (
            files("license_guard.templates")
            .joinpath("report.md.j2")
            .read_text(encoding="utf-8")
        )
        env = Environment(autoescape=True)
        return env.from_string(template_content)

    def render(
        self,
        registry: PackageRegistry,
        result: CheckResult,
        licenses: Optional[dict[str, Optional[str]]] = None,
    ) -> str:
        """Render the license inventory to Markdown.

        Args:
            registry: All scanned packages.
            result: Outcome of the compatibility check.
            licenses: Mapping of package key to resolved license. Packages
                missing from it fall back to their cached license.

        Returns:
            Rendered Markdown document as a string.
        """
        licenses = licenses or {}
        rows = []
        for package in sorted(registry, key=lambda p: p.key):
            if package.standard:
                kind = "standard"
            elif package.is_test:
                kind = "test"
            else:
                kind = "module"
            rows.append(
                {
                    "key": package.key,
                    "license": licenses.get(package.key, package.license or None),
                    "kind": kind,
                    "imported_by": registry.imported_by.get(package.key, []),
                }
            )

        return self.template.render(
            packages=rows,
            violations=result.violations,
            unresolved=result.unresolved,
            generated_at=datetime.now(),
        )

    @property
    def format_name(self) -> str:
        """Return the output format name.

        Returns:
            The string "markdown".
        """
        return "markdown"
