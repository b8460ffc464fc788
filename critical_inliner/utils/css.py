"""Stylesheet parsing, walking and serialization."""

import asyncio
import logging
from typing import Callable, Optional
import csscompressor
import cssutils
from cssutils.css import CSSRule, CSSStyleSheet
from .error import StylesheetParseError

# Disable cssutils logging
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

def _no_fetch(url):
    # @import targets are never loaded
    return None

def _parse(css_text: str, name: str) -> CSSStyleSheet:
    parser = cssutils.CSSParser(validate=False, fetcher=_no_fetch)
    try:
        return parser.parseString(css_text, href=name)
    except Exception as e:
        logger.error(f"Error parsing stylesheet {name}: {e}")
        raise StylesheetParseError(name, e) from e

def _serialize(sheet: CSSStyleSheet, compress: bool) -> str:
    css = sheet.cssText
    if isinstance(css, bytes):
        css = css.decode('utf-8')
    if compress:
        css = csscompressor.compress(css)
    return css

async def parse_stylesheet(css_text: str, name: str = '<style>') -> CSSStyleSheet:
    """Parse CSS text into a rule tree.

    Args:
        css_text: Stylesheet source
        name: Name used in error messages

    Returns:
        Parsed stylesheet

    Raises:
        StylesheetParseError: If the parser fails
    """
    await asyncio.sleep(0)
    return _parse(css_text, name)

async def serialize_stylesheet(sheet: CSSStyleSheet, compress: bool = True) -> str:
    """Serialize a rule tree back to CSS text, minified when compress is set."""
    await asyncio.sleep(0)
    return _serialize(sheet, compress)

def is_container(rule: CSSRule) -> bool:
    """Check whether a rule wraps nested rules (@media and friends)."""
    return hasattr(rule, 'cssRules') and rule.type != CSSRule.PAGE_RULE

def walk_style_rules(parent, visit: Callable[[CSSRule], Optional[bool]]) -> None:
    """Visit every rule in document order, deleting rules the visitor rejects.

    Containers are visited after their children and are deleted once they no
    longer hold any rule. ``parent`` is a stylesheet or a container rule.

    Args:
        parent: Stylesheet or container rule to walk
        visit: Callback returning False to delete the rule
    """
    doomed = []
    for index, rule in enumerate(parent.cssRules):
        if is_container(rule):
            walk_style_rules(rule, visit)
            if len(rule.cssRules) == 0:
                doomed.append(index)
                continue
        if visit(rule) is False:
            doomed.append(index)

    for index in reversed(doomed):
        parent.deleteRule(index)

# Exported functions
__all__ = [
    'parse_stylesheet',
    'serialize_stylesheet',
    'is_container',
    'walk_style_rules',
]
