"""Error utility for Critical Inliner."""

class CriticalInlinerError(Exception):
    """Base exception for Critical Inliner."""
    pass

class ConfigurationError(CriticalInlinerError):
    """Raised when configuration is invalid."""
    pass

class StylesheetParseError(CriticalInlinerError):
    """Raised when a stylesheet cannot be parsed."""

    def __init__(self, source: str, error: Exception):
        self.source = source
        self.error = error
        super().__init__(f"Failed to parse stylesheet {source}: {error}")

class FileOperationError(CriticalInlinerError):
    """Raised when file operations fail."""
    pass

# Exported exceptions
__all__ = [
    'CriticalInlinerError',
    'ConfigurationError',
    'StylesheetParseError',
    'FileOperationError',
]
