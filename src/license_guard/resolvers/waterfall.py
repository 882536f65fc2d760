"""Waterfall resolver orchestrating license resolution strategies.

This module implements the full resolution procedure for a package:
memoized result, standard-library and test sentinels, then each strategy
in priority order until one determines a license.
"""

import logging
from typing import Optional

from license_guard.cache import LicenseFileCache
from license_guard.errors import LicenseGuardError, NoLicenseFound
from license_guard.matchers.base import BaseMatcher
from license_guard.matchers.patterns import PatternMatcher
from license_guard.models import (
    STANDARD_LICENSE,
    TEST_LICENSE,
    Package,
    PackageRegistry,
)
from license_guard.resolvers.base import BaseResolver
from license_guard.resolvers.headers import HeaderResolver
from license_guard.resolvers.license_file import LicenseFileResolver
from license_guard.resolvers.locator import LicenseFileLocator

logger = logging.getLogger(__name__)


class WaterfallResolver:
    """Resolves package licenses through a cascade of strategies.

    Resolution strategy:
    1. Memoized: a license already cached on the package is returned as-is
    2. Standard library packages resolve to "standard"
    3. Test-only packages resolve to "test"
    4. Headers: every source file carries a recognisable license header
    5. License file: the nearest LICENSE file up to the module root

    A successful result is cached on the package, so each package is
    resolved at most once. One instance is meant to live for a whole run;
    it owns the license file cache shared by all packages.

    Attributes:
        matcher: Matcher shared by the default strategies.
        header_resolver: Strategy scanning source file headers.
        file_resolver: Strategy locating LICENSE files.
        resolvers: All strategies, sorted by priority.
    """

    def __init__(
        self,
        matcher: Optional[BaseMatcher] = None,
        locator: Optional[LicenseFileLocator] = None,
        cache: Optional[LicenseFileCache] = None,
        header_resolver: Optional[HeaderResolver] = None,
        file_resolver: Optional[LicenseFileResolver] = None,
    ) -> None:
        """Initialize WaterfallResolver with optional custom components.

        Args:
            matcher: Optional custom matcher. Defaults to PatternMatcher.
            locator: Optional custom locator for the license file strategy.
            cache: Optional license file cache for the license file strategy.
            header_resolver: Optional custom header strategy. If not provided,
                creates one with the matcher.
            file_resolver: Optional custom license file strategy. If not
                provided, creates one with the matcher, locator and cache.
        """
        self.matcher = matcher or PatternMatcher()
        self.header_resolver = header_resolver or HeaderResolver(self.matcher)
        self.file_resolver = file_resolver or LicenseFileResolver(
            self.matcher, locator=locator, cache=cache
        )
        self.resolvers: list[BaseResolver] = sorted(
            [self.header_resolver, self.file_resolver], key=lambda r: r.priority
        )

    @property
    def cache(self) -> LicenseFileCache:
        """Return the license file cache owned by this resolver."""
        return self.file_resolver.cache

    def resolve(self, package: Package) -> str:
        """Resolve a package's license identifier.

        Args:
            package: Package to resolve. Its ``license`` field is filled in
                on success.

        Returns:
            The license identifier, or one of the sentinels "standard"
            and "test".

        Raises:
            NoLicenseFound: If no strategy determines a license.
            LicenseReadError: If a file or directory cannot be read.
        """
        if package.license:
            return package.license
        if package.standard:
            return STANDARD_LICENSE
        if package.is_test:
            return TEST_LICENSE

        last_error: Optional[NoLicenseFound] = None
        for resolver in self.resolvers:
            try:
                license_id = resolver.resolve(package)
            except NoLicenseFound as e:
                logger.debug("%s: %s", resolver.name, e)
                last_error = e
                continue
            logger.debug(
                "Resolved %s as %s via %s", package.key, license_id, resolver.name
            )
            package.license = license_id
            return license_id

        raise NoLicenseFound(f"no license found for {package.key}") from last_error

    def resolve_all(self, registry: PackageRegistry) -> dict[str, Optional[str]]:
        """Resolve every package in a registry.

        Failures don't stop the other resolutions; they are logged and
        mapped to None.

        Args:
            registry: Packages to resolve.

        Returns:
            Dictionary mapping each normalized import path to its license
            identifier (or None if resolution failed).
        """
        results: dict[str, Optional[str]] = {}
        for package in registry:
            try:
                results[package.key] = self.resolve(package)
            except LicenseGuardError as e:
                logger.warning("Could not resolve license of %s: %s", package.key, e)
                results[package.key] = None

        resolved = sum(1 for license_id in results.values() if license_id is not None)
        logger.info("Resolved %d/%d package licenses", resolved, len(results))
        return results
