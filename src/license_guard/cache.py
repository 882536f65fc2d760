"""In-memory cache of license identifiers extracted from license files.

Many packages of one Go module share the module's LICENSE file. This cache
ensures each such file is read and scanned at most once per resolver.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class LicenseFileCache:
    """Maps absolute license file paths to their extracted license identifier.

    The cache lives as long as the resolver that owns it. There is no
    eviction and nothing is persisted between runs.

    Attributes:
        hits: Number of lookups answered from the cache.
        misses: Number of lookups that found nothing.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[str, str] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(path: str) -> str:
        return os.path.abspath(path)

    def get(self, path: str) -> Optional[str]:
        """Retrieve the cached license identifier for a file.

        Args:
            path: Path to the license file (absolute or relative).

        Returns:
            The cached identifier, or None on a cache miss.
        """
        license_id = self._entries.get(self._key(path))
        if license_id is None:
            self.misses += 1
        else:
            self.hits += 1
        return license_id

    def set(self, path: str, license_id: str) -> None:
        """Store the license identifier extracted from a file.

        Args:
            path: Path to the license file.
            license_id: Identifier extracted from the file's contents.
        """
        logger.debug("Caching %s for %s", license_id, path)
        self._entries[self._key(path)] = license_id

    def clear(self) -> None:
        """Drop all entries and reset the statistics."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def info(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with cache information:
                - count: Number of cached license files
                - hits: Lookups answered from the cache
                - misses: Lookups that missed
        """
        return {
            "count": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
        }

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._key(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
