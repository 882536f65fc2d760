"""License compatibility checking.

Flags packages that directly import a package under a restrictive
("viral") license while not being under that license themselves. The
license family is identified by a substring of the license identifier,
``"AGPL"`` by default.
"""

import logging

from license_guard.errors import LicenseGuardError
from license_guard.models import (
    CheckResult,
    FlaggedImport,
    Package,
    PackageRegistry,
    UnresolvedLicense,
    Violation,
    normalize_import_path,
)
from license_guard.resolvers.waterfall import WaterfallResolver

logger = logging.getLogger(__name__)

DEFAULT_RESTRICTIVE_MARKER = "AGPL"


class CompatibilityChecker:
    """Checks direct imports against a restrictive license marker.

    Only direct imports are inspected; transitive dependencies are not.
    Packages that are themselves under the restrictive license are exempt.

    A package whose license cannot be determined is treated as having an
    empty license, which never contains the marker. By default this happens
    silently; with ``treat_unresolved_as_non_restrictive=False`` each such
    package is also logged and listed in :attr:`CheckResult.unresolved`.

    Attributes:
        resolver: Resolver used to determine licenses.
        restrictive_marker: Substring identifying restrictive licenses.
        treat_unresolved_as_non_restrictive: Whether unresolved licenses are
            passed over silently.
    """

    def __init__(
        self,
        resolver: WaterfallResolver,
        restrictive_marker: str = DEFAULT_RESTRICTIVE_MARKER,
        treat_unresolved_as_non_restrictive: bool = True,
    ) -> None:
        """Initialize the checker.

        Args:
            resolver: Resolver used to determine licenses.
            restrictive_marker: Substring identifying restrictive licenses.
            treat_unresolved_as_non_restrictive: If False, unresolved packages
                are reported in the result.
        """
        if not restrictive_marker:
            raise ValueError("restrictive_marker must not be empty")
        self.resolver = resolver
        self.restrictive_marker = restrictive_marker
        self.treat_unresolved_as_non_restrictive = treat_unresolved_as_non_restrictive

    def is_restrictive(self, license_id: str) -> bool:
        """Return True if a license identifier contains the restrictive marker."""
        return self.restrictive_marker in license_id

    def _license_of(self, package: Package, result: CheckResult, reported: set[str]) -> str:
        try:
            return self.resolver.resolve(package)
        except LicenseGuardError as e:
            if self.treat_unresolved_as_non_restrictive:
                logger.debug("Treating %s as unlicensed: %s", package.key, e)
            elif package.key not in reported:
                logger.warning("Could not determine license of %s: %s", package.key, e)
                reported.add(package.key)
                result.unresolved.append(UnresolvedLicense(package.key, str(e)))
            return ""

    def check(self, registry: PackageRegistry) -> CheckResult:
        """Check every package in a registry.

        Args:
            registry: Packages to check, indexed by normalized import path.

        Returns:
            CheckResult with one violation group per offending package, in
            registry order.
        """
        result = CheckResult()
        reported: set[str] = set()

        for package in registry:
            license_id = self._license_of(package, result, reported)
            if self.is_restrictive(license_id):
                continue

            violation = None
            for imp in package.imports:
                key = normalize_import_path(imp)
                dep = registry.get(key)
                if dep is None or dep.standard or dep.is_test:
                    continue
                dep_license = self._license_of(dep, result, reported)
                if not self.is_restrictive(dep_license):
                    continue
                if violation is None:
                    violation = Violation(key=package.key, license=license_id)
                    result.violations.append(violation)
                violation.imports.append(FlaggedImport(key=key, license=dep_license))

        logger.info(
            "Checked %d packages: %d violation(s)", len(registry), result.count
        )
        return result
