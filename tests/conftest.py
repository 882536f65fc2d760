"""Pytest configuration and fixtures."""

import re
from pathlib import Path
from typing import Callable, Optional

import pytest

from license_guard.matchers.base import BaseMatcher
from license_guard.models import LicenseMatch, Package

MIT_TEXT = """MIT License

Copyright (c) 2024 Example Authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction.
"""

AGPL_TEXT = """                    GNU AFFERO GENERAL PUBLIC LICENSE
                       Version 3, 19 November 2007

 Copyright (C) 2007 Free Software Foundation, Inc. <https://fsf.org/>
 Everyone is permitted to copy and distribute verbatim copies
 of this license document, but changing it is not allowed.
"""


class CountingMatcher(BaseMatcher):
    """Stub matcher recognising ``license: <id>`` lines and counting scans.

    Attributes:
        calls: Number of times :meth:`scan` was called.
    """

    PATTERN = re.compile(rb"license:\s*(\S+)")

    def __init__(self) -> None:
        self.calls = 0

    @property
    def name(self) -> str:
        return "counting"

    def scan(self, data: bytes) -> list[LicenseMatch]:
        self.calls += 1
        return [
            LicenseMatch(m.group(1).decode(), 1.0, "stub")
            for m in self.PATTERN.finditer(data)
        ]


@pytest.fixture
def matcher() -> CountingMatcher:
    """Return a fresh counting stub matcher."""
    return CountingMatcher()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a file below tmp_path, creating parents."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_package() -> Callable[..., Package]:
    """Return a factory for Package objects with sensible defaults."""

    def _make(
        import_path: str,
        dir: str = "/nonexistent",
        imports: Optional[list[str]] = None,
        license: str = "",
        standard: bool = False,
        for_test: str = "",
        go_files: Optional[list[str]] = None,
    ) -> Package:
        package = Package(
            dir=dir,
            import_path=import_path,
            imports=imports or [],
            standard=standard,
            for_test=for_test,
            go_files=go_files or [],
        )
        package.license = license
        return package

    return _make


@pytest.fixture
def license_texts() -> dict[str, str]:
    """Return recognisable license texts keyed by short name."""
    return {"MIT": MIT_TEXT, "AGPL": AGPL_TEXT}
