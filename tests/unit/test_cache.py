"""Unit tests for the in-memory license file cache."""

import os

import pytest

from license_guard.cache import LicenseFileCache


@pytest.fixture
def cache():
    """Create an empty LicenseFileCache."""
    return LicenseFileCache()


class TestCacheBasicOperations:
    """Test basic cache storage and retrieval."""

    def test_set_and_get_cache_entry(self, cache):
        """Test storing and retrieving a cache entry."""
        cache.set("/mod/example.com/lib@v1.0.0/LICENSE", "MIT")

        assert cache.get("/mod/example.com/lib@v1.0.0/LICENSE") == "MIT"

    def test_get_nonexistent_entry(self, cache):
        """Test cache miss returns None."""
        assert cache.get("/nowhere/LICENSE") is None

    def test_relative_and_absolute_paths_share_entry(self, cache, tmp_path, monkeypatch):
        """Test that entries are keyed by absolute path."""
        monkeypatch.chdir(tmp_path)
        cache.set("LICENSE", "Apache-2.0")

        assert cache.get(os.path.join(str(tmp_path), "LICENSE")) == "Apache-2.0"
        assert os.path.join(str(tmp_path), "LICENSE") in cache

    def test_statistics(self, cache):
        """Test that hits and misses are counted."""
        cache.get("/a/LICENSE")
        cache.set("/a/LICENSE", "MIT")
        cache.get("/a/LICENSE")
        cache.get("/a/LICENSE")

        assert cache.info() == {"count": 1, "hits": 2, "misses": 1}
        assert len(cache) == 1

    def test_clear(self, cache):
        """Test that clear drops entries and statistics."""
        cache.set("/a/LICENSE", "MIT")
        cache.get("/a/LICENSE")
        cache.clear()

        assert len(cache) == 0
        assert cache.info() == {"count": 0, "hits": 0, "misses": 0}
