"""Resolve licenses from the license headers of a package's source files."""

import logging
import os
from collections import Counter

from license_guard.errors import NoLicenseFound
from license_guard.matchers.base import BaseMatcher
from license_guard.models import Package
from license_guard.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)


class HeaderResolver(BaseResolver):
    """Resolver that scans every source file for a license header.

    The strategy only succeeds when *all* source files carry a recognisable
    license. A single file without one abandons the whole strategy, since a
    partial answer says nothing about the unlabelled files.

    When files carry different licenses, the most frequent identifier wins;
    ties go to the identifier seen first.

    Priority: 10 (tried before looking for a LICENSE file)
    """

    def __init__(self, matcher: BaseMatcher) -> None:
        """Initialize HeaderResolver.

        Args:
            matcher: Matcher used to identify each file's license.
        """
        self.matcher = matcher

    @property
    def name(self) -> str:
        """Return the resolver name.

        Returns:
            "headers"
        """
        return "headers"

    @property
    def priority(self) -> int:
        """Return resolver priority.

        Returns:
            10
        """
        return 10

    def resolve(self, package: Package) -> str:
        """Determine the license from the package's source file headers.

        Args:
            package: Package whose ``go_files`` are scanned.

        Returns:
            The license identifier shared by the source files.

        Raises:
            NoLicenseFound: If the package has no source files or any file
                lacks a recognisable license.
            LicenseReadError: If a source file cannot be read.
        """
        if not package.go_files:
            raise NoLicenseFound(f"no source files in {package.key}")

        counts: Counter[str] = Counter()
        for filename in package.go_files:
            license_id = self.matcher.identify_file(os.path.join(package.dir, filename))
            counts[license_id] += 1

        if len(counts) > 1:
            logger.debug("Multiple header licenses in %s: %s", package.key, dict(counts))
        license_id, _ = counts.most_common(1)[0]
        return license_id
