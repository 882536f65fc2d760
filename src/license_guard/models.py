"""Core data models for license_guard.

This module defines the fundamental data structures used throughout the
license checking system: Go packages as reported by ``go list``, the
registry that indexes them, license matches, and the results of a
compatibility check.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

VENDOR_PREFIX = "vendor/"

# Sentinel license identifiers for packages that are never scanned
STANDARD_LICENSE = "standard"
TEST_LICENSE = "test"


def normalize_import_path(import_path: str) -> str:
    """Strip the vendoring prefix from an import path.

    Only a single leading ``vendor/`` is removed, so ``vendor/vendor/x``
    becomes ``vendor/x``.

    Args:
        import_path: Raw import path as reported by ``go list``.

    Returns:
        The normalized import path.
    """
    if import_path.startswith(VENDOR_PREFIX):
        return import_path[len(VENDOR_PREFIX):]
    return import_path


@dataclass
class Package:
    """A Go package, a node in the dependency graph.

    Mirrors the subset of ``go help list`` fields the checker needs. The
    resolved license is cached on the instance once determined and is never
    recomputed afterwards.

    Attributes:
        dir: Directory containing the package sources.
        import_path: Raw import path (may carry a ``vendor/`` prefix).
        imports: Import paths used directly by this package.
        deps: All recursively imported dependencies.
        standard: True if the package is part of the Go standard library.
        for_test: Name of the test this package exists for, or empty.
        go_files: Go source file names relative to ``dir``.
    """

    dir: str
    import_path: str
    imports: list[str] = field(default_factory=list)
    deps: list[str] = field(default_factory=list)
    standard: bool = False
    for_test: str = ""
    go_files: list[str] = field(default_factory=list)
    license: str = field(default="", compare=False, repr=False)

    @property
    def key(self) -> str:
        """Return the normalized import path used as registry key."""
        return normalize_import_path(self.import_path)

    @property
    def is_test(self) -> bool:
        """Return True if the package only exists to support a test."""
        return bool(self.for_test)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Package":
        """Build a Package from one decoded ``go list -json`` object.

        Args:
            record: Mapping with Go field names (``Dir``, ``ImportPath``, ...).

        Returns:
            A new Package. Missing fields default to empty values.
        """
        return cls(
            dir=record.get("Dir", ""),
            import_path=record.get("ImportPath", ""),
            imports=list(record.get("Imports") or []),
            deps=list(record.get("Deps") or []),
            standard=bool(record.get("Standard", False)),
            for_test=record.get("ForTest", ""),
            go_files=list(record.get("GoFiles") or []),
        )


class PackageRegistry:
    """Packages indexed by normalized import path.

    Insertion order is preserved, which keeps the compatibility check and
    its report in the order ``go list`` emitted the packages. A later
    package with the same key replaces the earlier one.

    The reverse maps ``imported_by`` and ``depended_on_by`` are built for
    every package that is neither standard nor test-only.
    """

    def __init__(self) -> None:
        self._packages: dict[str, Package] = {}
        self.imported_by: dict[str, list[str]] = {}
        self.depended_on_by: dict[str, list[str]] = {}

    @classmethod
    def from_packages(cls, packages: Iterable[Package]) -> "PackageRegistry":
        """Create a registry from an iterable of packages."""
        registry = cls()
        for package in packages:
            registry.add(package)
        return registry

    def add(self, package: Package) -> None:
        """Index a package and record its outgoing edges in the reverse maps."""
        key = package.key
        self._packages[key] = package
        if package.standard or package.is_test:
            return
        for dep in package.deps:
            self.depended_on_by.setdefault(normalize_import_path(dep), []).append(key)
        for imp in package.imports:
            self.imported_by.setdefault(normalize_import_path(imp), []).append(key)

    def get(self, key: str) -> Optional[Package]:
        """Return the package for a normalized key, or None."""
        return self._packages.get(key)

    def __getitem__(self, key: str) -> Package:
        return self._packages[key]

    def __contains__(self, key: object) -> bool:
        return key in self._packages

    def __iter__(self) -> Iterator[Package]:
        return iter(self._packages.values())

    def __len__(self) -> int:
        return len(self._packages)


@dataclass(frozen=True)
class LicenseMatch:
    """A single license identified in a blob of text.

    Attributes:
        license_id: License identifier (e.g., "MIT", "AGPL-3.0-only").
        confidence: Match confidence between 0 and 1.
        matched_by: Short description of what produced the match.
    """

    license_id: str
    confidence: float
    matched_by: str = ""


@dataclass(frozen=True)
class FlaggedImport:
    """A direct import carrying a restrictive license."""

    key: str
    license: str


@dataclass
class Violation:
    """A package that directly imports restrictively licensed packages.

    Attributes:
        key: Normalized import path of the consuming package.
        license: The consuming package's resolved license (may be empty).
        imports: The flagged imports, in import order.
    """

    key: str
    license: str
    imports: list[FlaggedImport] = field(default_factory=list)


@dataclass(frozen=True)
class UnresolvedLicense:
    """A package whose license could not be determined."""

    key: str
    reason: str


@dataclass
class CheckResult:
    """Outcome of a compatibility check.

    Attributes:
        violations: One group per violating consuming package.
        unresolved: Packages whose license could not be determined. Only
            populated when the checker is asked to report them.
    """

    violations: list[Violation] = field(default_factory=list)
    unresolved: list[UnresolvedLicense] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Return the number of violating consuming packages."""
        return len(self.violations)

    @property
    def ok(self) -> bool:
        """Return True when no violations were found."""
        return not self.violations
