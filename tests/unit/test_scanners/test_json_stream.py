"""Tests for the JsonStreamScanner and package stream decoding."""

from pathlib import Path

import pytest

from license_guard.errors import DependencyListError
from license_guard.scanners.json_stream import JsonStreamScanner, decode_package_stream

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


class TestDecodePackageStream:
    """Test decoding of concatenated go list JSON objects."""

    def test_decodes_concatenated_objects(self):
        """Test that each object becomes a package, in order."""
        text = '{"ImportPath": "a"}{"ImportPath": "b"}\n\n  {"ImportPath": "c"}\n'

        packages = decode_package_stream(text)

        assert [p.import_path for p in packages] == ["a", "b", "c"]

    def test_empty_stream(self):
        """Test that an empty stream yields no packages."""
        assert decode_package_stream("") == []
        assert decode_package_stream("  \n\t") == []

    def test_stops_at_first_malformed_record(self):
        """Test that records before a malformed one are kept and later ones dropped."""
        text = (FIXTURES / "go_list_truncated.json").read_text()

        packages = decode_package_stream(text)

        assert [p.import_path for p in packages] == ["example.com/a"]

    def test_stops_at_non_object_record(self):
        """Test that a JSON value other than an object ends decoding."""
        packages = decode_package_stream('{"ImportPath": "a"} [1, 2] {"ImportPath": "b"}')

        assert [p.import_path for p in packages] == ["a"]


class TestJsonStreamScanner:
    """Test suite for JsonStreamScanner."""

    @pytest.fixture
    def fixture_path(self) -> Path:
        """Return path to the go list output fixture."""
        return FIXTURES / "go_list_deps.json"

    def test_source_name(self, fixture_path):
        """Test that source_name is the input file name."""
        assert JsonStreamScanner(fixture_path).source_name == "go_list_deps.json"

    def test_scan(self, fixture_path):
        """Test reading packages from saved go list output."""
        packages = JsonStreamScanner(fixture_path).scan()

        assert [p.key for p in packages] == ["errors", "github.com/pkg/errors", "example.com/app"]
        assert packages[0].standard is True
        assert packages[1].dir == "/home/dev/go/pkg/mod/github.com/pkg/errors@v0.9.1"
        assert packages[1].go_files == ["errors.go", "go113.go", "stack.go"]
        assert packages[2].imports == ["fmt", "github.com/pkg/errors"]

    def test_missing_file(self, tmp_path):
        """Test that an unreadable input raises DependencyListError."""
        with pytest.raises(DependencyListError):
            JsonStreamScanner(tmp_path / "missing.json").scan()
