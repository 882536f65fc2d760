"""Output reporters for check results.

This module provides reporters for rendering the outcome of a license
check to various output formats (plain text, Markdown).
"""

from license_guard.reporters.base import BaseReporter
from license_guard.reporters.markdown import MarkdownReporter
from license_guard.reporters.text import TextReporter

__all__ = ["BaseReporter", "MarkdownReporter", "TextReporter"]
