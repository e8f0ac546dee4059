"""Custom exceptions for license-file-generator."""


class LicenseFileGeneratorError(Exception):
    """Base exception for all license-file-generator errors."""

    pass


class DirectoryNotFoundError(LicenseFileGeneratorError):
    """Exception raised when the project directory does not exist."""

    pass


class NetworkError(LicenseFileGeneratorError):
    """Exception raised when a network request fails."""

    pass


class ConfigurationError(LicenseFileGeneratorError):
    """Exception raised when configuration is invalid."""

    pass


class OutputError(LicenseFileGeneratorError):
    """Exception raised when a report cannot be written."""

    pass
