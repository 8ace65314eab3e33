"""Custom exceptions for pkgmeta."""


class PkgMetaError(Exception):
    """Base exception for all pkgmeta errors."""

    pass


class UrlParseError(PkgMetaError):
    """Exception raised when a value is not a valid url."""

    pass


class VersionParseError(PkgMetaError):
    """Exception raised when a version string can not be parsed."""

    pass


class ConstructionError(PkgMetaError):
    """Exception raised when a record is constructed with invalid arguments."""

    pass


class ConfigurationError(PkgMetaError):
    """Exception raised when configuration is invalid."""

    pass


class PackageFileError(PkgMetaError):
    """Exception raised when a package metadata file can not be read or written."""

    pass


class GenerationError(PkgMetaError):
    """Exception raised when package files can not be generated."""

    pass
