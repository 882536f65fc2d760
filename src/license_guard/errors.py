"""Exception types raised by license_guard."""


class LicenseGuardError(Exception):
    """Base class for all license_guard errors."""


class NoLicenseFound(LicenseGuardError, LookupError):
    """No license could be determined by any available strategy."""


class LicenseReadError(LicenseGuardError, OSError):
    """A file or directory could not be read while resolving a license."""


class DependencyListError(LicenseGuardError, OSError):
    """The dependency list could not be produced or read."""
