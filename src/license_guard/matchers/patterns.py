"""Pattern-based license text matcher.

Recognises licenses in two ways:

1. ``SPDX-License-Identifier:`` tags, validated and normalized with the
   license-expression library. These are the most reliable signal.
2. Characteristic phrases of well-known license texts and headers
   (the "GNU AFFERO GENERAL PUBLIC LICENSE / Version 3" title, "Permission
   is hereby granted, free of charge", ...).
"""

import logging
import re
from typing import Optional

from license_expression import ExpressionError, get_spdx_licensing

from license_guard.matchers.base import BaseMatcher
from license_guard.models import LicenseMatch

logger = logging.getLogger(__name__)

# Initialize SPDX licensing library for normalization
SPDX = get_spdx_licensing()

SPDX_TAG_PATTERN = re.compile(
    r"SPDX-License-Identifier:[ \t]*(?P<expr>[^\r\n]*?)[ \t]*(?:\*/|-->|#\}|\r?$)",
    re.MULTILINE,
)

TAG_CONFIDENCE = 1.0
TEXT_CONFIDENCE = 0.8

# Word separator inside license headers, which may wrap across comment lines
_SEP = r"(?:\s|//|#|\*)+"


def _phrase(words: str) -> str:
    return _SEP.join(re.escape(word) for word in words.split())


def _title(title: str, version: str) -> str:
    """Match a license title line directly followed by its version line."""
    return r"^[ \t]*" + _phrase(title) + r"[ \t]*\r?\n\s*Version " + re.escape(version)


def _published(name: str, version: str) -> str:
    """Match the FSF "as published by ... version N" header wording."""
    return (
        _phrase(f"{name} as published by the Free Software Foundation")
        + r"[,;]?" + _SEP + r"(?:either" + _SEP + r")?version" + _SEP
        + re.escape(version) + r"\b"
    )


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE | re.MULTILINE)


# (family, pattern, license id). GPL-family texts quote each other (GPL-3.0
# section 13 names the AGPL, MPL-2.0 lists the GPLs as secondary licenses),
# so those families only match on a title line or the standard header
# wording. Within a family the first pattern that matches wins, which is
# why BSD-3-Clause is listed before BSD-2-Clause.
TEXT_PATTERNS: list[tuple[str, re.Pattern[str], str]] = [
    ("agpl", _compile(_title("GNU AFFERO GENERAL PUBLIC LICENSE", "3")), "AGPL-3.0-only"),
    ("agpl", _compile(_published("GNU Affero General Public License", "3")), "AGPL-3.0-only"),
    ("lgpl", _compile(_title("GNU LESSER GENERAL PUBLIC LICENSE", "3")), "LGPL-3.0-only"),
    ("lgpl", _compile(_title("GNU LESSER GENERAL PUBLIC LICENSE", "2.1")), "LGPL-2.1-only"),
    ("lgpl", _compile(_published("GNU Lesser General Public License", "3")), "LGPL-3.0-only"),
    ("lgpl", _compile(_published("GNU Lesser General Public License", "2.1")), "LGPL-2.1-only"),
    ("gpl", _compile(_title("GNU GENERAL PUBLIC LICENSE", "3")), "GPL-3.0-only"),
    ("gpl", _compile(_title("GNU GENERAL PUBLIC LICENSE", "2")), "GPL-2.0-only"),
    ("gpl", _compile(_published("GNU General Public License", "3")), "GPL-3.0-only"),
    ("gpl", _compile(_published("GNU General Public License", "2")), "GPL-2.0-only"),
    ("apache", _compile(_phrase("Apache License") + r",?" + _SEP + r"Version 2\.0"), "Apache-2.0"),
    ("mpl", _compile(_phrase("Mozilla Public License") + r",?" + _SEP + r"(?:Version|v\.)\s*2\.0"), "MPL-2.0"),
    ("epl", _compile(r"Eclipse Public License\s*-?\s*v(?:ersion)?\s*2\.0"), "EPL-2.0"),
    ("epl", _compile(r"Eclipse Public License\s*-?\s*v(?:ersion)?\s*1\.0"), "EPL-1.0"),
    ("bsd", _compile(r"Redistribution and use in source and binary forms[\s\S]*?Neither the name"), "BSD-3-Clause"),
    ("bsd", _compile(r"BSD 3-Clause"), "BSD-3-Clause"),
    ("bsd", _compile(r"Redistribution and use in source and binary forms"), "BSD-2-Clause"),
    ("bsd", _compile(r"BSD 2-Clause"), "BSD-2-Clause"),
    ("mit", _compile(r"Permission is hereby granted, free of charge"), "MIT"),
    ("mit", _compile(r"\bMIT License\b"), "MIT"),
    ("isc", _compile(r"\bISC License\b"), "ISC"),
    ("unlicense", _compile(r"This is free and unencumbered software released into the public domain"), "Unlicense"),
    ("bsl", _compile(r"Boost Software License"), "BSL-1.0"),
    ("cc0", _compile(r"\bCC0 1\.0 Universal\b"), "CC0-1.0"),
    ("zlib", _compile(r"\bzlib License\b"), "Zlib"),
]


def normalize_expression(expression: str) -> Optional[str]:
    """Normalize an SPDX license expression.

    Args:
        expression: Raw expression, e.g. "MIT OR Apache-2.0".

    Returns:
        The normalized expression, or None if it is empty or contains
        unknown license keys.
    """
    expression = expression.strip()
    if not expression:
        return None
    try:
        parsed = SPDX.parse(expression, validate=True)
    except ExpressionError as e:
        logger.debug("Ignoring invalid SPDX expression %r: %s", expression, e)
        return None
    if parsed is None:
        return None
    return str(parsed)


class PatternMatcher(BaseMatcher):
    """Matcher recognising SPDX tags and well-known license phrases.

    SPDX tags are ranked ahead of text phrases, and text phrases by where
    they first occur. Duplicate identifiers are reported once, at their
    highest rank.
    """

    @property
    def name(self) -> str:
        """Return the matcher name.

        Returns:
            "patterns"
        """
        return "patterns"

    def scan(self, data: bytes) -> list[LicenseMatch]:
        """Identify the licenses present in a document.

        Args:
            data: Raw document contents. Decoded as UTF-8, replacing
                undecodable bytes.

        Returns:
            Ranked list of matches, possibly empty.
        """
        text = data.decode("utf-8", errors="replace")
        matches: list[LicenseMatch] = []
        seen: set[str] = set()

        for tag in SPDX_TAG_PATTERN.finditer(text):
            license_id = normalize_expression(tag.group("expr"))
            if license_id and license_id not in seen:
                seen.add(license_id)
                matches.append(
                    LicenseMatch(license_id, TAG_CONFIDENCE, "SPDX-License-Identifier")
                )

        # A license text names the license it grants before any it merely
        # refers to, so text matches are ranked by position.
        found: list[tuple[int, LicenseMatch]] = []
        matched_families: set[str] = set()
        for family, pattern, license_id in TEXT_PATTERNS:
            if family in matched_families:
                continue
            hit = pattern.search(text)
            if hit:
                matched_families.add(family)
                found.append((hit.start(), LicenseMatch(license_id, TEXT_CONFIDENCE, family)))

        found.sort(key=lambda item: item[0])
        for _, match in found:
            if match.license_id not in seen:
                seen.add(match.license_id)
                matches.append(match)

        matches.sort(key=lambda m: m.confidence, reverse=True)
        return matches
