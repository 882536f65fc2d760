"""Locate license files for Go packages.

A package directory inside the module cache looks like
``$GOMODCACHE/github.com/org/repo@v1.2.3/sub/pkg``. When the package
directory holds no license file, the search climbs towards the module root
but never past the path segment carrying the ``@version`` marker.
"""

import logging
import os

from license_guard.errors import LicenseReadError, NoLicenseFound

logger = logging.getLogger(__name__)

# Marker demarcating a versioned module root in module cache paths
MODULE_BOUNDARY_MARKER = "@"

# Canonical license file names, lowercased, in order of preference.
# Based on https://pkg.go.dev/license-policy
LICENSE_FILENAMES: tuple[str, ...] = (
    "license", "license.md", "license.markdown", "license.txt",
    "licence", "licence.md", "licence.markdown", "licence.txt",
    "copying", "copying.md", "copying.markdown", "copying.txt",
    "license-2.0.txt", "licence-2.0.txt",
    "license-apache", "licence-apache",
    "license-apache-2.0.txt", "licence-apache-2.0.txt",
    "license-mit", "licence-mit",
    "license.mit", "licence.mit",
    "license.code", "licence.code",
    "license.docs", "licence.docs",
    "license.rst", "licence.rst",
    "mit-license", "mit-licence",
    "mit-license.md", "mit-licence.md",
    "mit-license.markdown", "mit-licence.markdown",
    "mit-license.txt", "mit-licence.txt",
    "mit_license", "mit_licence",
    "unlicense", "unlicence",
    "license_apache2",  # used by grafana/loki
)

_PRIORITY = {name: index for index, name in enumerate(LICENSE_FILENAMES)}


class LicenseFileLocator:
    """Finds canonically named license files.

    When a directory holds several canonical files (e.g. ``LICENSE`` and
    ``COPYING``), the one listed first in :data:`LICENSE_FILENAMES` wins,
    independent of directory listing order.

    Attributes:
        boundary_marker: Character whose presence in a path means the
            search may continue into the parent directory.
    """

    def __init__(self, boundary_marker: str = MODULE_BOUNDARY_MARKER) -> None:
        """Initialize the locator.

        Args:
            boundary_marker: Module boundary marker, ``@`` for Go module caches.
        """
        self.boundary_marker = boundary_marker

    def find(self, directory: str) -> str:
        """Find a license file directly inside a directory.

        Args:
            directory: Directory to list (not recursively).

        Returns:
            Path of the license file.

        Raises:
            NoLicenseFound: If no entry has a canonical license file name.
            LicenseReadError: If the directory cannot be listed.
        """
        best_name = None
        best_rank = len(LICENSE_FILENAMES)
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir():
                        continue
                    rank = _PRIORITY.get(entry.name.lower())
                    if rank is not None and rank < best_rank:
                        best_name, best_rank = entry.name, rank
        except OSError as e:
            raise LicenseReadError(f"listing directory {directory}: {e}") from e

        if best_name is None:
            raise NoLicenseFound(f"no license file in {directory}")
        return os.path.join(directory, best_name)

    def find_up(self, directory: str) -> str:
        """Find a license file in a directory or its module ancestors.

        The directory itself is always searched. Parent directories are
        searched only while their path still contains the boundary marker.

        Args:
            directory: Package directory to start from.

        Returns:
            Path of the nearest license file.

        Raises:
            NoLicenseFound: If the walk ends without finding a license file.
            LicenseReadError: If a directory cannot be listed.
        """
        while True:
            try:
                return self.find(directory)
            except NoLicenseFound:
                pass
            parent = os.path.dirname(directory)
            if parent == directory or self.boundary_marker not in parent:
                break
            logger.debug("No license file in %s, trying %s", directory, parent)
            directory = parent
        raise NoLicenseFound(f"no license file in {directory} or its module ancestors")
