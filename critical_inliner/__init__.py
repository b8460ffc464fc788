"""Critical Inliner: inline the CSS a page uses and defer loading the rest."""

from .core import CriticalInliner, Options, SheetReport
from .utils.config import VERSION
from .utils.error import (
    ConfigurationError,
    CriticalInlinerError,
    FileOperationError,
    StylesheetParseError,
)

__version__ = VERSION

__all__ = [
    'CriticalInliner',
    'Options',
    'SheetReport',
    'CriticalInlinerError',
    'ConfigurationError',
    'StylesheetParseError',
    'FileOperationError',
    '__version__',
]
