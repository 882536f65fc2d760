"""Base interface for license resolvers.

Resolvers implement one strategy for determining a package's license,
such as scanning source file headers or locating a LICENSE file.
"""

from abc import ABC, abstractmethod

from license_guard.models import Package


class BaseResolver(ABC):
    """Abstract base class for license resolution strategies."""

    @abstractmethod
    def resolve(self, package: Package) -> str:
        """Determine the license identifier of a package.

        Args:
            package: Package to resolve.

        Returns:
            The license identifier.

        Raises:
            NoLicenseFound: If this strategy cannot determine a license.
            LicenseReadError: If a file needed by the strategy is unreadable.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging.

        Returns:
            Name like "headers", "license-file", etc.
        """
        ...

    @property
    def priority(self) -> int:
        """Return resolver priority for waterfall ordering.

        Lower numbers are tried first. Default is 100.

        Returns:
            Priority value.
        """
        return 100
