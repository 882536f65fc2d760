"""Base interface for dependency scanners.

Scanners produce the list of Go packages a module depends on, either by
running the go tool or by reading its saved output.
"""

from abc import ABC, abstractmethod

from license_guard.models import Package


class BaseScanner(ABC):
    """Abstract base class for dependency scanners."""

    @abstractmethod
    def scan(self) -> list[Package]:
        """Scan the source and extract the package list.

        Returns:
            List of Package objects in the order they were reported.

        Raises:
            DependencyListError: If the package list cannot be produced.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source.

        Returns:
            Name like "go list", or the input file name.
        """
        ...
