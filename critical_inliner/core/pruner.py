"""Reduce a stylesheet to the rules used by a document."""

import re
import logging
from bs4 import BeautifulSoup
from cssutils.css import CSSRule, CSSStyleSheet

from ..utils.config import FONT_PROPERTY_PATTERN
from ..utils.css import walk_style_rules
from .matcher import matches

logger = logging.getLogger(__name__)

_FONT_PROPERTY_RE = re.compile(FONT_PROPERTY_PATTERN, re.IGNORECASE)

def prune(sheet: CSSStyleSheet, document: BeautifulSoup) -> str:
    """Remove selectors and rules that match nothing in the document.

    Style rules keep only their matching selectors and are deleted when none
    match. Containers left empty are deleted. @font-face rules are left for
    the font pass.

    The values of font-related declarations in the surviving rules are
    collected while pruning, so rules that were dropped never contribute.

    Args:
        sheet: Parsed stylesheet, modified in place
        document: Document the selectors are matched against

    Returns:
        Space-separated font declaration values of the surviving rules
    """
    corpus = []

    def visit(rule):
        if rule.type != CSSRule.STYLE_RULE:
            return None

        selectors = [s.selectorText for s in rule.selectorList]
        matched = [s for s in selectors if matches(s, document)]
        if not matched:
            logger.debug(f"Removing unused rule {rule.selectorText!r}")
            return False
        if len(matched) != len(selectors):
            rule.selectorText = ', '.join(matched)

        for prop in rule.style.getProperties(all=True):
            if _FONT_PROPERTY_RE.search(prop.name):
                corpus.append(' ' + prop.value)
        return None

    walk_style_rules(sheet, visit)
    return ''.join(corpus)

# Exported functions
__all__ = ['prune']
