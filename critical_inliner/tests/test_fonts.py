"""Tests for @font-face handling."""

import pytest

from ..core.fonts import font_face_source, resolve_fonts
from ..core.options import Options
from ..core.pruner import prune

DOCUMENT = '<html><head></head><body><p>text</p></body></html>'

FONT_RULE = '@font-face { font-family: "X"; src: url(x.woff2) }'
USING_RULE = 'p { font-family: "X" }'

def _preloads(context):
    return context.document.head.find_all('link', attrs={'as': 'font'})

@pytest.fixture
def reduce(parse, serialize, make_context):
    """Return a helper running prune + resolve_fonts, returning (css, context)."""
    def helper(css, options, html=DOCUMENT):
        context = make_context(html)
        sheet = parse(css)
        corpus = prune(sheet, context.document)
        resolve_fonts(sheet, context, corpus, options)
        return serialize(sheet), context
    return helper

class TestFontFaceSource:
    """Tests for font_face_source()."""

    def test_family_and_first_url(self, parse):
        """The first url() of src is used."""
        sheet = parse(
            '@font-face { font-family: "Open Sans"; '
            'src: url("a.woff2") format("woff2"), url(a.woff) format("woff") }'
        )
        family, src = font_face_source(sheet.cssRules[0])
        assert family == '"Open Sans"'
        assert src == 'a.woff2'

    def test_missing_declarations(self, parse):
        """Missing family or src come back as None."""
        sheet = parse('@font-face { font-weight: bold }')
        assert font_face_source(sheet.cssRules[0]) == (None, None)

class TestInlineGating:
    """Tests for keeping or dropping @font-face rules."""

    def test_kept_when_used_and_inlining_enabled(self, reduce):
        """A used font survives with inline_fonts."""
        css, _ = reduce(FONT_RULE + USING_RULE, Options(inline_fonts=True))
        assert '@font-face' in css
        assert 'x.woff2' in css

    def test_kept_with_fonts_shorthand(self, reduce):
        """fonts=True enables inlining."""
        css, _ = reduce(FONT_RULE + USING_RULE, Options(fonts=True))
        assert '@font-face' in css

    @pytest.mark.parametrize('options', [
        Options(),
        Options(inline_fonts=False),
        Options(fonts=False, inline_fonts=True),
    ])
    def test_dropped_when_inlining_disabled(self, reduce, options):
        """Without font inlining the rule goes, used or not."""
        css, _ = reduce(FONT_RULE + USING_RULE, options)
        assert '@font-face' not in css
        assert 'p{font-family:"X"}' in css

    def test_dropped_when_family_unused(self, reduce, font_css):
        """Fonts only referenced by pruned rules are dropped."""
        css, _ = reduce(font_css, Options(inline_fonts=True))
        assert '"Used"' in css
        assert 'unused.woff2' not in css
        assert css.count('@font-face') == 1

    def test_dropped_without_src(self, reduce):
        """A @font-face without a URL is dropped."""
        css, _ = reduce('@font-face { font-family: "X" }' + USING_RULE, Options(inline_fonts=True))
        assert '@font-face' not in css

class TestNestedFontFace:
    """Tests for @font-face rules inside @media."""

    NESTED = '@media screen { @font-face { font-family: "X"; src: url(x.woff2) } p { font-family: "X" } }'

    def test_kept_and_preloaded_with_fonts(self, reduce):
        """A used nested font survives and is preloaded."""
        css, context = reduce(self.NESTED, Options(fonts=True))
        assert css.startswith('@media screen')
        assert '@font-face' in css
        assert 'x.woff2' in css
        assert [link['href'] for link in _preloads(context)] == ['x.woff2']

    def test_dropped_without_inlining(self, reduce):
        """Without inlining only the nested style rule stays."""
        css, context = reduce(self.NESTED, Options())
        assert '@font-face' not in css
        assert 'p{font-family:"X"}' in css
        assert len(_preloads(context)) == 1

    def test_emptied_media_removed(self, reduce):
        """A @media holding only a dropped @font-face goes too."""
        css, _ = reduce('@media print { ' + FONT_RULE + ' }' + USING_RULE, Options())
        assert css == 'p{font-family:"X"}'

class TestFontPreload:
    """Tests for font preload links."""

    def test_preloads_font_urls(self, reduce):
        """Each font URL gets a preload link in <head>."""
        _, context = reduce(FONT_RULE, Options())
        links = _preloads(context)
        assert len(links) == 1
        assert links[0]['rel'] == 'preload'
        assert links[0]['href'] == 'x.woff2'
        assert not links[0].has_attr('crossorigin')

    def test_preloads_unused_fonts_too(self, reduce, font_css):
        """Preloading does not depend on usage."""
        _, context = reduce(font_css, Options())
        assert [link['href'] for link in _preloads(context)] == [
            '/fonts/used.woff2',
            '/fonts/unused.woff2',
        ]

    def test_cross_origin_font(self, reduce):
        """Absolute URLs are preloaded with crossorigin."""
        _, context = reduce('@font-face { font-family: "X"; src: url(https://cdn.example/x.woff2) }', Options())
        assert _preloads(context)[0]['crossorigin'] == 'anonymous'

    def test_duplicate_urls_preloaded_once(self, reduce):
        """Two rules with the same URL give one preload."""
        css = FONT_RULE + '@font-face { font-family: "X"; font-weight: bold; src: url(x.woff2) }'
        _, context = reduce(css, Options())
        assert len(_preloads(context)) == 1

    def test_dedup_spans_stylesheets(self, parse, make_context):
        """The dedup set lives on the context, across sheets."""
        context = make_context(DOCUMENT)
        for _ in range(2):
            sheet = parse(FONT_RULE)
            resolve_fonts(sheet, context, prune(sheet, context.document), Options())
        assert len(_preloads(context)) == 1
        assert context.preloaded_fonts == ['x.woff2']

    @pytest.mark.parametrize('options', [Options(preload_fonts=False), Options(fonts=False, preload_fonts=False)])
    def test_preload_disabled(self, reduce, options):
        """preload_fonts=False emits no preload."""
        _, context = reduce(FONT_RULE, options)
        assert _preloads(context) == []

    def test_fonts_false_keeps_preloading(self, reduce):
        """fonts=False only turns inlining off."""
        _, context = reduce(FONT_RULE, Options(fonts=False))
        assert len(_preloads(context)) == 1

    def test_creates_missing_head(self, reduce):
        """Documents without <head> get one for the preload."""
        _, context = reduce(FONT_RULE, Options(), html='<p>text</p>')
        assert context.document.head is not None
        assert len(_preloads(context)) == 1
