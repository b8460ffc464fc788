"""Selector matching against a document."""

import re
import logging
from bs4 import BeautifulSoup

from ..utils.config import PSEUDO_SELECTOR_PATTERN

logger = logging.getLogger(__name__)

_PSEUDO_RE = re.compile(PSEUDO_SELECTOR_PATTERN, re.IGNORECASE)

def strip_pseudos(selector: str) -> str:
    """Remove pseudo-classes and pseudo-elements from a selector.

    Only the existence of the base element matters for criticality, so
    ``a:hover`` becomes ``a`` and ``input:focus[type=text]`` becomes
    ``input[type=text]``.
    """
    return _PSEUDO_RE.sub('', selector).strip()

def matches(selector: str, document: BeautifulSoup) -> bool:
    """Check whether any element in the document matches the selector.

    Args:
        selector: CSS selector, possibly with pseudo-classes/elements
        document: Document to query

    Returns:
        True if at least one element matches. Empty or invalid selectors
        never match.
    """
    stripped = strip_pseudos(selector)
    if not stripped:
        return False
    try:
        return document.select_one(stripped) is not None
    except Exception as e:
        logger.debug(f"Dropping unmatchable selector {selector!r}: {e}")
        return False

# Exported functions
__all__ = ['strip_pseudos', 'matches']
