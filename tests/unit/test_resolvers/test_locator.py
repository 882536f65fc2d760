"""Unit tests for LicenseFileLocator."""

import os

import pytest

from license_guard.errors import LicenseReadError, NoLicenseFound
from license_guard.resolvers.locator import LICENSE_FILENAMES, LicenseFileLocator


@pytest.fixture
def locator() -> LicenseFileLocator:
    """Return a locator for Go module cache paths."""
    return LicenseFileLocator()


class TestFind:
    """Test searching a single directory."""

    def test_finds_license_among_other_files(self, locator, write_file, tmp_path):
        """Test that the one canonical license file is returned."""
        write_file("pkg/main.go", "package main\n")
        write_file("pkg/README.md", "# readme\n")
        write_file("pkg/go.mod", "module example.com/pkg\n")
        license_path = write_file("pkg/LICENSE", "license: MIT\n")

        assert locator.find(str(tmp_path / "pkg")) == str(license_path)

    @pytest.mark.parametrize(
        "filename",
        ["LICENSE.txt", "License.md", "COPYING", "LICENCE", "UNLICENSE", "LICENSE-MIT", "LICENSE_APACHE2"],
    )
    def test_name_match_is_case_insensitive(self, locator, write_file, tmp_path, filename):
        """Test that canonical names match regardless of case."""
        license_path = write_file(f"pkg/{filename}", "text\n")

        assert locator.find(str(tmp_path / "pkg")) == str(license_path)

    def test_skips_directories(self, locator, tmp_path):
        """Test that a directory named LICENSE is not returned."""
        (tmp_path / "pkg" / "LICENSE").mkdir(parents=True)

        with pytest.raises(NoLicenseFound):
            locator.find(str(tmp_path / "pkg"))

    def test_ignores_similar_names(self, locator, write_file, tmp_path):
        """Test that non-canonical names are not matched."""
        write_file("pkg/LICENSE.go", "package pkg\n")
        write_file("pkg/license_test.go", "package pkg\n")

        with pytest.raises(NoLicenseFound):
            locator.find(str(tmp_path / "pkg"))

    def test_prefers_license_over_copying(self, locator, write_file, tmp_path):
        """Test that the priority order decides between canonical files."""
        write_file("pkg/COPYING", "text\n")
        license_path = write_file("pkg/LICENSE", "text\n")

        assert locator.find(str(tmp_path / "pkg")) == str(license_path)

    def test_unlistable_directory_raises(self, locator, tmp_path):
        """Test that a missing directory raises LicenseReadError."""
        with pytest.raises(LicenseReadError, match="listing directory"):
            locator.find(str(tmp_path / "missing"))


class TestFindUp:
    """Test the upward search through module directories."""

    def test_walks_up_to_module_root(self, locator, write_file, tmp_path):
        """Test that the license at the module root is found from a subpackage."""
        license_path = write_file("mod/example.com/lib@v1.2.0/LICENSE", "text\n")
        write_file("mod/example.com/lib@v1.2.0/internal/deep/deep.go", "package deep\n")

        found = locator.find_up(str(tmp_path / "mod/example.com/lib@v1.2.0/internal/deep"))

        assert found == str(license_path)

    def test_nearest_license_wins(self, locator, write_file, tmp_path):
        """Test that a license in the package directory shadows the module's."""
        write_file("mod/example.com/lib@v1.2.0/LICENSE", "text\n")
        nested = write_file("mod/example.com/lib@v1.2.0/third_party/x/LICENSE", "text\n")

        found = locator.find_up(str(tmp_path / "mod/example.com/lib@v1.2.0/third_party/x"))

        assert found == str(nested)

    def test_stops_at_module_boundary(self, locator, write_file, tmp_path):
        """Test that the walk does not escape the versioned module directory."""
        write_file("mod/example.com/LICENSE", "text\n")
        (tmp_path / "mod/example.com/lib@v1.2.0/sub").mkdir(parents=True)

        with pytest.raises(NoLicenseFound):
            locator.find_up(str(tmp_path / "mod/example.com/lib@v1.2.0/sub"))

    def test_no_marker_searches_only_start_directory(self, locator, tmp_path, mocker):
        """Test that without the marker no ancestor is searched."""
        (tmp_path / "project" / "pkg").mkdir(parents=True)
        (tmp_path / "project" / "LICENSE").write_text("text\n")
        spy = mocker.spy(locator, "find")

        with pytest.raises(NoLicenseFound):
            locator.find_up(str(tmp_path / "project" / "pkg"))

        assert spy.call_count == 1

    def test_custom_boundary_marker(self, write_file, tmp_path):
        """Test that the boundary marker is configurable."""
        license_path = write_file("cache/lib+v1/LICENSE", "text\n")
        (tmp_path / "cache/lib+v1/sub").mkdir()

        locator = LicenseFileLocator(boundary_marker="+")

        assert locator.find_up(str(tmp_path / "cache/lib+v1/sub")) == str(license_path)


def test_license_filenames_are_lowercase():
    """Test that the canonical name list can be compared to lowercased names."""
    assert all(name == name.lower() for name in LICENSE_FILENAMES)
    assert len(set(LICENSE_FILENAMES)) == len(LICENSE_FILENAMES)
    assert os.sep not in "".join(LICENSE_FILENAMES)
