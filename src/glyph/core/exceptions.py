"""Custom exceptions for the glyph font asset service."""

from typing import Any


class GlyphError(Exception):
    """Base exception for all glyph errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ValidationError(GlyphError):
    """Exception raised for input validation errors."""


class StorageError(GlyphError):
    """Exception raised for font storage operation errors."""


class CacheError(GlyphError):
    """Exception raised by the in-memory font cache."""


class ConfigurationError(GlyphError):
    """Exception raised for configuration errors."""


# Specific exception classes for TRY003 compliance
class DirectoryReadError(StorageError):
    """Exception raised when the font directory cannot be read."""

    def __init__(self, directory: str, error: str):
        super().__init__(f"Failed to read font directory {directory}: {error}")
        self.directory = directory


class FontIOError(StorageError):
    """Exception raised when writing or deleting a font file fails."""

    def __init__(self, operation: str, path: str, error: str):
        super().__init__(f"Failed to {operation} font file {path}: {error}")
        self.operation = operation
        self.path = path


class UnsupportedFormatError(ValidationError):
    """Exception raised for font file extensions outside the allow-list."""

    def __init__(self, extension: str):
        super().__init__(f"Unsupported font format: {extension or '<none>'}")
        self.extension = extension


class InvalidEncodingError(ValidationError):
    """Exception raised when an upload payload is not a base64 data URL."""

    def __init__(self, reason: str = "expected data:<mime>;base64,<data>"):
        super().__init__(f"Invalid base64 data format: {reason}")


class InvalidFontNameError(ValidationError):
    """Exception raised when an uploaded file name is not a bare file name."""

    def __init__(self, file_name: str):
        super().__init__(f"Invalid font file name: {file_name!r}")


class UploadTooLargeError(ValidationError):
    """Exception raised when a decoded upload exceeds the size limit."""

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(f"Font upload too large: {size_bytes} bytes (max {max_bytes} bytes)")


class FontLoadError(CacheError):
    """Exception raised when a font cannot be loaded into the cache."""

    def __init__(self, path: str, error: str):
        super().__init__(f"Failed to load font {path}: {error}")
        self.path = path


class UnknownCommandError(GlyphError):
    """Exception raised for console events with no registered handler."""

    def __init__(self, event: str):
        super().__init__(f"Unknown console command: {event}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown logging level names."""

    def __init__(self, level: str):
        super().__init__(f"Invalid log level: {level}")
