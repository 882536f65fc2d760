"""Scanner for saved ``go list -deps -json`` output.

``go list -json`` writes a stream of concatenated JSON objects, one per
package, rather than a JSON array. The stream is decoded one object at a
time. Decoding stops at the first object that fails to parse; everything
decoded up to that point is kept.
"""

import json
import logging
from pathlib import Path

from license_guard.errors import DependencyListError
from license_guard.models import Package
from license_guard.scanners.base import BaseScanner

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


def decode_package_stream(text: str) -> list[Package]:
    """Decode a stream of concatenated ``go list -json`` objects.

    Args:
        text: The raw stream.

    Returns:
        Packages decoded before the end of the stream or the first
        malformed record.
    """
    packages: list[Package] = []
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            break
        try:
            record, pos = _decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            logger.debug("Stopped decoding package stream: %s", e)
            break
        if not isinstance(record, dict):
            logger.debug("Stopped decoding package stream at non-object record")
            break
        packages.append(Package.from_record(record))
    return packages


class JsonStreamScanner(BaseScanner):
    """Scanner reading ``go list -deps -json`` output saved to a file.

    Attributes:
        source_path: Path to the saved stream.
    """

    def __init__(self, source_path: Path) -> None:
        """Initialize the scanner.

        Args:
            source_path: Path to a file holding ``go list -deps -json`` output.
        """
        self.source_path = source_path

    @property
    def source_name(self) -> str:
        """Return the input file name."""
        return self.source_path.name

    def scan(self) -> list[Package]:
        """Read and decode the saved stream.

        Returns:
            List of Package objects.

        Raises:
            DependencyListError: If the file cannot be read.
        """
        try:
            text = self.source_path.read_text(encoding="utf-8")
        except OSError as e:
            raise DependencyListError(f"reading {self.source_path}: {e}") from e
        return decode_package_stream(text)
