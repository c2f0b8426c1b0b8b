"""Exception taxonomy for dependency license resolution.

Only InvalidLocator and ManifestFetchTransportFailure are fatal to a
request. "No manifest found" and "manifest empty" are result outcomes, see
analysis.models.ResolutionOutcome.
"""


class DepLicensesError(Exception):
    """Base class for all errors raised by this package."""


class InvalidLocator(DepLicensesError):
    """The repository locator could not be parsed into owner and repo."""


class ManifestFetchTransportFailure(DepLicensesError):
    """The file-fetch collaborator failed for a reason other than not-found."""

    def __init__(self, message: str, file_name: str = "", branch: str = ""):
        super().__init__(message)
        self.file_name = file_name
        self.branch = branch


class MetadataLookupFailure(DepLicensesError):
    """A single package-metadata lookup failed. Never fatal to a request."""

    def __init__(self, message: str, package_name: str = ""):
        super().__init__(message)
        self.package_name = package_name


class ManifestParseError(DepLicensesError):
    """Raised inside a manifest parser; always caught before leaving it."""
