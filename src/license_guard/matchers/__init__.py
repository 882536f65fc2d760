"""License text matchers.

This module provides matchers that identify licenses from the raw text of
license files and source file headers.
"""

from license_guard.matchers.base import BaseMatcher
from license_guard.matchers.patterns import PatternMatcher

__all__ = ["BaseMatcher", "PatternMatcher"]
