"""Tests for selector matching."""

import pytest

from ..core.matcher import matches, strip_pseudos
from ..utils.html import parse_html

DOCUMENT = (
    '<html><head><title>t</title></head><body>'
    '<ul class="nav"><li class="item"><a href="/x">x</a></li></ul>'
    '<input type="text" name="q">'
    '<p id="intro">hi</p>'
    '</body></html>'
)

@pytest.fixture
def document():
    return parse_html(DOCUMENT)

class TestStripPseudos:
    """Tests for pseudo-class/element removal."""

    @pytest.mark.parametrize('selector, expected', [
        ('a:hover', 'a'),
        ('li::before', 'li'),
        ('input:focus[type=text]', 'input[type=text]'),
        ('.nav a:hover > span', '.nav a > span'),
        ('a:hover::after', 'a'),
        ('li:nth-child(2n+1)', 'li'),
        ('p:not(.x).y', 'p.y'),
        ('input::-webkit-input-placeholder', 'input'),
        ('A:HOVER', 'A'),
    ])
    def test_strips_pseudo_tokens(self, selector, expected):
        """Pseudo tokens are removed, the rest is untouched."""
        assert strip_pseudos(selector) == expected

    def test_keeps_plain_selectors(self):
        """Selectors without pseudo tokens come back unchanged."""
        assert strip_pseudos('ul.nav > li[data-x="1"] + p') == 'ul.nav > li[data-x="1"] + p'

    def test_keeps_colons_inside_attribute_values(self):
        """A colon inside a quoted attribute value is not a pseudo-class."""
        assert strip_pseudos('a[href^="mailto:x"]') == 'a[href^="mailto:x"]'

    def test_bare_pseudo_strips_to_empty(self):
        """A selector made only of pseudo tokens strips to nothing."""
        assert strip_pseudos(':hover') == ''
        assert strip_pseudos('::selection') == ''

class TestMatches:
    """Tests for matches()."""

    def test_matching_selectors(self, document):
        """Selectors with a matching element are critical."""
        assert matches('body', document)
        assert matches('ul.nav > li a', document)
        assert matches('#intro', document)
        assert matches('input[type=text]', document)

    def test_non_matching_selectors(self, document):
        """Selectors without a matching element are not critical."""
        assert not matches('.sidebar', document)
        assert not matches('ol li', document)
        assert not matches('input[type=checkbox]', document)

    @pytest.mark.parametrize('selector', [
        'a:hover',
        'li::before',
        'input:focus[type=text]',
        'p:hover',
        'div::after',
        '.nav li:first-child a:visited',
        'input:checked[type=checkbox]',
    ])
    def test_pseudo_verdict_equals_stripped_verdict(self, document, selector):
        """Pseudo tokens never change the verdict."""
        assert matches(selector, document) == matches(strip_pseudos(selector), document)

    def test_pseudo_selectors_match_base_element(self, document):
        """A pseudo selector is critical when its base element exists."""
        assert matches('a:hover', document)
        assert matches('li::before', document)
        assert matches('input:focus[type=text]', document)
        assert not matches('button:hover', document)

    def test_empty_selector_never_matches(self, document):
        """Empty selectors fail closed."""
        assert not matches('', document)
        assert not matches('   ', document)
        assert not matches(':root', document)

    @pytest.mark.parametrize('selector', ['a[', '!!!', 'p >', '[data-x="1"'])
    def test_invalid_selector_never_matches(self, document, selector):
        """Malformed selectors fail closed instead of raising."""
        assert matches(selector, document) is False
