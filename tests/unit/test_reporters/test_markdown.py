"""Tests for the Markdown reporter."""

import pytest

from license_guard.models import (
    CheckResult,
    FlaggedImport,
    PackageRegistry,
    UnresolvedLicense,
    Violation,
)
from license_guard.reporters.markdown import MarkdownReporter


@pytest.fixture
def reporter():
    """Create a MarkdownReporter instance."""
    return MarkdownReporter()


@pytest.fixture
def registry(make_package):
    """Return a small registry with a module, a standard and a test package."""
    return PackageRegistry.from_packages(
        [
            make_package("fmt", standard=True),
            make_package("example.com/lib", license="AGPL-3.0-only"),
            make_package("example.com/app", imports=["fmt", "example.com/lib"], license="MIT"),
            make_package("example.com/app.test", for_test="example.com/app"),
        ]
    )


def test_format_name(reporter):
    """Test the format name."""
    assert reporter.format_name == "markdown"


def test_inventory_lists_module_packages(reporter, registry):
    """Test that the table lists module packages sorted, with import counts."""
    output = reporter.render(registry, CheckResult())

    assert "| `example.com/app` | MIT | 0 |" in output
    assert "| `example.com/lib` | AGPL-3.0-only | 1 |" in output
    assert output.index("example.com/app") < output.index("example.com/lib")
    assert "`fmt`" not in output
    assert "app.test" not in output
    assert "No license violations found." in output


def test_resolved_licenses_override_cached(reporter, registry):
    """Test that the licenses mapping is used, unresolved shown as unknown."""
    licenses = {"example.com/app": "Apache-2.0", "example.com/lib": None}

    output = reporter.render(registry, CheckResult(), licenses)

    assert "| `example.com/app` | Apache-2.0 | 0 |" in output
    assert "| `example.com/lib` | *unknown* | 1 |" in output


def test_violations_and_unresolved_sections(reporter, registry):
    """Test rendering of violation and unresolved sections."""
    result = CheckResult(
        violations=[
            Violation("example.com/app", "MIT", [FlaggedImport("example.com/lib", "AGPL-3.0-only")])
        ],
        unresolved=[UnresolvedLicense("example.com/other", "no license found")],
    )

    output = reporter.render(registry, result)

    assert "## Violations" in output
    assert "### `example.com/app` (MIT)" in output
    assert "- imports `example.com/lib` (AGPL-3.0-only)" in output
    assert "No license violations found." not in output
    assert "## Unresolved Licenses" in output
    assert "- `example.com/other`: no license found" in output


def test_html_is_escaped(reporter, make_package):
    """Test that package data containing HTML is escaped."""
    registry = PackageRegistry.from_packages(
        [make_package('example.com/<script>alert("xss")</script>', license="MIT")]
    )

    output = reporter.render(registry, CheckResult())

    assert "&lt;script&gt;alert(&#34;xss&#34;)&lt;/script&gt;" in output
    assert '<script>alert("xss")</script>' not in output


def test_custom_template(registry, tmp_path):
    """Test rendering with a user supplied template."""
    template = tmp_path / "custom.j2"
    template.write_text(
        "{% for pkg in packages %}{{ pkg.key }}={{ pkg.kind }};{% endfor %}",
        encoding="utf-8",
    )

    output = MarkdownReporter(template_path=template).render(registry, CheckResult())

    assert output == (
        "example.com/app=module;example.com/app.test=test;"
        "example.com/lib=module;fmt=standard;"
    )


def test_write(reporter, registry, tmp_path):
    """Test writing the inventory to a file."""
    output_path = tmp_path / "licenses.md"

    reporter.write(registry, CheckResult(), output_path)

    assert output_path.read_text(encoding="utf-8").startswith("# Dependency Licenses")
