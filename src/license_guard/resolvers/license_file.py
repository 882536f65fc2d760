"""Resolve licenses from LICENSE files in the package or module directory."""

import logging
from typing import Optional

from license_guard.cache import LicenseFileCache
from license_guard.errors import NoLicenseFound
from license_guard.matchers.base import BaseMatcher
from license_guard.models import Package
from license_guard.resolvers.base import BaseResolver
from license_guard.resolvers.locator import LicenseFileLocator

logger = logging.getLogger(__name__)


class LicenseFileResolver(BaseResolver):
    """Resolver that identifies the nearest LICENSE file.

    The file is searched for in the package directory and then in its
    ancestors up to the module root. Identified files are cached by path,
    so packages of the same module share a single scan.

    Attributes:
        matcher: Matcher used to identify the license file's contents.
        locator: Locator used to find the license file.
        cache: Cache of license identifiers keyed by file path.

    Priority: 100
    """

    def __init__(
        self,
        matcher: BaseMatcher,
        locator: Optional[LicenseFileLocator] = None,
        cache: Optional[LicenseFileCache] = None,
    ) -> None:
        """Initialize LicenseFileResolver.

        Args:
            matcher: Matcher used to identify license file contents.
            locator: Optional custom locator. Defaults to a Go module locator.
            cache: Optional shared cache. Defaults to a new empty cache.
        """
        self.matcher = matcher
        self.locator = locator or LicenseFileLocator()
        self.cache = cache if cache is not None else LicenseFileCache()

    @property
    def name(self) -> str:
        """Return the resolver name.

        Returns:
            "license-file"
        """
        return "license-file"

    def resolve(self, package: Package) -> str:
        """Determine the license from the nearest license file.

        Args:
            package: Package whose directory is searched.

        Returns:
            The license identifier of the license file.

        Raises:
            NoLicenseFound: If no license file exists up to the module root,
                or the file's license is not recognised.
            LicenseReadError: If a directory or the license file is unreadable.
        """
        try:
            license_file = self.locator.find_up(package.dir)
        except NoLicenseFound as e:
            raise NoLicenseFound(f"finding license file for {package.key}: {e}") from e

        license_id = self.cache.get(license_file)
        if license_id is None:
            license_id = self.matcher.identify_file(license_file)
            self.cache.set(license_file, license_id)
        else:
            logger.debug("Using cached license %s for %s", license_id, license_file)
        return license_id
