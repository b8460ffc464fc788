"""HTML document handling functionality."""

import logging
from typing import Dict, Optional
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import Script, Stylesheet
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)

# String classes bs4 uses for raw-text elements
TEXT_CONTAINERS = {
    'style': Stylesheet,
    'script': Script,
}

def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML content into a mutable document.

    Attributes such as ``rel`` and ``class`` are kept as plain strings so that
    reads and writes behave like DOM attribute access.

    Args:
        html: HTML content to parse

    Returns:
        BeautifulSoup document
    """
    return BeautifulSoup(html, 'html.parser', multi_valued_attributes=None)

class SourceOrderFormatter(HTMLFormatter):
    """HTML formatter that writes attributes in document order."""

    def attributes(self, tag):
        return list(tag.attrs.items()) if tag.attrs else []

# Void elements are written as <link ...>, not <link .../>
SOURCE_FORMATTER = SourceOrderFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)

def serialize_document(document: BeautifulSoup) -> str:
    """Serialize a document back to HTML.

    Untouched markup keeps its attribute order, void element syntax and
    declared charset (no ``eventual_encoding`` substitution).
    """
    return document.decode(eventual_encoding=None, formatter=SOURCE_FORMATTER)

def create_element(document: BeautifulSoup, name: str,
                   attrs: Optional[Dict[str, str]] = None, text: Optional[str] = None) -> Tag:
    """Create a detached element.

    Args:
        document: Owning document
        name: Tag name
        attrs: Attributes in output order
        text: Optional text content

    Returns:
        New element
    """
    element = document.new_tag(name, attrs=dict(attrs or {}))
    if text is not None:
        set_text(document, element, text)
    return element

def get_text(element: Tag) -> str:
    """Return the text content of an element, one line per text child."""
    return '\n'.join(
        str(child) for child in element.contents if isinstance(child, NavigableString)
    )

def set_text(document: BeautifulSoup, element: Tag, text: str) -> None:
    """Replace the children of an element with a single text node."""
    element.clear()
    element.append(document.new_string(text, TEXT_CONTAINERS.get(element.name)))

def remove_element(element: Tag) -> None:
    """Remove an element from its parent, if it still has one."""
    if element.parent is not None:
        element.decompose()

def _root(document: BeautifulSoup) -> Tag:
    return document.find('html') or document

def get_head(document: BeautifulSoup) -> Tag:
    """Return the document's <head>, creating it when missing."""
    head = document.head
    if head is None:
        head = document.new_tag('head')
        _root(document).insert(0, head)
        logger.debug("Document has no <head>, created one")
    return head

def get_body(document: BeautifulSoup) -> Tag:
    """Return the document's <body>, creating it when missing."""
    body = document.body
    if body is None:
        body = document.new_tag('body')
        _root(document).append(body)
        logger.debug("Document has no <body>, created one")
    return body

# Exported functions
__all__ = [
    'parse_html',
    'serialize_document',
    'create_element',
    'get_text',
    'set_text',
    'remove_element',
    'get_head',
    'get_body',
]
