"""License Guard - Restrictive license import checker for Go modules.

This package provides tools for resolving the license of every package a
Go module depends on and flagging packages that directly import code under
a restrictive license such as the AGPL.
"""

__version__ = "0.1.0"

from license_guard.errors import (
    DependencyListError,
    LicenseGuardError,
    LicenseReadError,
    NoLicenseFound,
)
from license_guard.models import (
    CheckResult,
    FlaggedImport,
    LicenseMatch,
    Package,
    PackageRegistry,
    UnresolvedLicense,
    Violation,
    normalize_import_path,
)

__all__ = [
    "__version__",
    "CheckResult",
    "DependencyListError",
    "FlaggedImport",
    "LicenseGuardError",
    "LicenseMatch",
    "LicenseReadError",
    "NoLicenseFound",
    "Package",
    "PackageRegistry",
    "UnresolvedLicense",
    "Violation",
    "normalize_import_path",
]
