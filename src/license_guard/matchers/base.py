"""Base interface for license text matchers.

Matchers look at the raw bytes of a document (a LICENSE file or a source
file with a license header) and report which licenses it carries.
"""

from abc import ABC, abstractmethod

from license_guard.errors import LicenseReadError, NoLicenseFound
from license_guard.models import LicenseMatch


class BaseMatcher(ABC):
    """Abstract base class for license text matchers.

    Subclasses implement :meth:`scan`; :meth:`identify_file` builds on it
    to turn a file into a single license identifier.
    """

    @abstractmethod
    def scan(self, data: bytes) -> list[LicenseMatch]:
        """Identify the licenses present in a document.

        Args:
            data: Raw document contents.

        Returns:
            Matches ranked by decreasing confidence. Empty if nothing
            was recognised.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the matcher name for logging/debugging."""
        ...

    def identify_file(self, path: str) -> str:
        """Read a file and return the identifier of its best match.

        Args:
            path: Path of the file to scan.

        Returns:
            The license identifier of the highest ranked match.

        Raises:
            LicenseReadError: If the file cannot be read.
            NoLicenseFound: If the matcher recognises no license.
        """
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise LicenseReadError(f"reading license file {path}: {e}") from e

        matches = self.scan(data)
        if not matches:
            raise NoLicenseFound(f"scanning license file {path}")
        return matches[0].license_id
