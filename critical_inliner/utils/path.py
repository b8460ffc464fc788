"""Path handling functionality."""

import os
import logging
from typing import Optional
from urllib.parse import unquote, urlparse
from .config import HTML_EXTENSIONS

logger = logging.getLogger(__name__)

def is_html_file(path: str) -> bool:
    """Check if file is HTML by extension."""
    return os.path.splitext(path)[1].lower() in HTML_EXTENSIONS

def is_path_in_directory(path: str, directory: str) -> bool:
    """Check if path is within directory.

    Args:
        path: Path to check
        directory: Directory to check against

    Returns:
        True if path is within directory
    """
    path = os.path.abspath(path)
    directory = os.path.abspath(directory)
    try:
        return os.path.commonpath([path, directory]) == directory
    except ValueError:
        # Different drives on Windows
        return False

def resolve_stylesheet_path(href: str, css_root: str, base_dir: Optional[str] = None) -> Optional[str]:
    """Map a stylesheet href to a file below css_root.

    Root-relative hrefs (``/css/a.css``) resolve against ``css_root``, other
    relative hrefs against ``base_dir`` (defaults to ``css_root``). Query
    strings and fragments are ignored.

    Args:
        href: Stylesheet reference as written in the document
        css_root: Directory stylesheets must live in
        base_dir: Directory of the referencing document

    Returns:
        Absolute file path, or None for URLs with a scheme or host and for
        paths escaping css_root
    """
    parsed = urlparse(href)
    if parsed.scheme or parsed.netloc:
        return None

    path = unquote(parsed.path)
    if not path:
        return None

    if path.startswith('/'):
        candidate = os.path.join(css_root, path.lstrip('/'))
    else:
        candidate = os.path.join(base_dir or css_root, path)
    candidate = os.path.normpath(os.path.abspath(candidate))

    if not is_path_in_directory(candidate, css_root):
        logger.warning(f"Refusing stylesheet outside {css_root}: {href}")
        return None
    return candidate

# Exported functions
__all__ = [
    'is_html_file',
    'is_path_in_directory',
    'resolve_stylesheet_path',
]
