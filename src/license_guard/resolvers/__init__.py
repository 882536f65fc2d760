"""License resolvers for determining a package's license.

This module provides the individual resolution strategies (source file
headers, LICENSE files) and the waterfall resolver that chains them.
"""

from license_guard.resolvers.base import BaseResolver
from license_guard.resolvers.headers import HeaderResolver
from license_guard.resolvers.license_file import LicenseFileResolver
from license_guard.resolvers.locator import LICENSE_FILENAMES, LicenseFileLocator
from license_guard.resolvers.waterfall import WaterfallResolver

__all__ = [
    "BaseResolver",
    "HeaderResolver",
    "LICENSE_FILENAMES",
    "LicenseFileLocator",
    "LicenseFileResolver",
    "WaterfallResolver",
]
