"""Non-blocking delivery of linked stylesheets."""

import re
import logging
from typing import Mapping, Optional
import orjson
from bs4 import BeautifulSoup, Tag

from ..utils.config import CSS_LOADER_PREAMBLE, DISABLED_MEDIA, LAZY_LOADER_PATCH, NETWORK_URL_PATTERN
from ..utils.html import create_element, get_body
from .context import ProcessContext
from .critical import build_critical_css
from .options import Options

logger = logging.getLogger(__name__)

_NETWORK_URL_RE = re.compile(NETWORK_URL_PATTERN)

def loader_preamble(lazy: bool = False) -> str:
    """Return the shared ``$loadcss`` helper, in its lazy variant if requested."""
    if lazy:
        return CSS_LOADER_PREAMBLE.replace('l.href', LAZY_LOADER_PATCH + 'l.href', 1)
    return CSS_LOADER_PREAMBLE

def _js_string(value: str) -> str:
    return orjson.dumps(value).decode('utf-8')

class DeliveryRewriter:
    """Inline the critical part of linked stylesheets and defer the rest.

    Strategies, selected by ``Options.preload``:

    - ``None``: turn the link into a preload and append a real stylesheet link
      to the end of <body>.
    - ``"body"``: move the link to the end of <body>.
    - ``"media"``: load with a never-matching media query, restore it on load.
    - ``"swap"``: preload, switch to ``rel=stylesheet`` on load.
    - ``"js"``: preload, then add the sheet from a script via ``$loadcss``.
    - ``"js-lazy"``: like ``"js"`` but the sheet stays disabled until loaded.
    - ``False``: inline critical CSS only, leave the link alone.

    The script-based strategies and ``"media"``/``"swap"`` get a <noscript>
    fallback unless ``Options.noscript_fallback`` is off.
    """

    def __init__(self, options: Options):
        self.options = options

    def is_excluded(self, href: str) -> bool:
        """Check whether a stylesheet URL is left out of processing."""
        if self.options.url_filter is not None:
            return bool(self.options.url_filter(href))
        return _NETWORK_URL_RE.match(href) is not None

    async def rewrite(self, link: Tag, css_files: Mapping[str, str], context: ProcessContext) -> None:
        """Inline critical CSS for a <link rel="stylesheet"> and rewrite the link.

        Args:
            link: Stylesheet link element
            css_files: Stylesheet contents keyed by href
            context: Current processing context

        Raises:
            StylesheetParseError: If the stylesheet cannot be parsed
        """
        href = link.get('href')
        if not href:
            return
        if self.is_excluded(href):
            logger.debug(f"Skipping excluded stylesheet {href}")
            return

        css_text = css_files.get(href)
        if css_text is None:
            logger.warning(f"No content for stylesheet {href}, leaving it untouched")
            return

        mode = self.options.preload
        media = link.get('media')

        # Claimed before the first await so the earliest link in the document gets it
        preamble = ''
        if mode in ('js', 'js-lazy') and context.claim_loader():
            preamble = loader_preamble(lazy=mode == 'js-lazy')

        critical = await build_critical_css(css_text, href, context, self.options)

        document = context.document
        if critical.strip():
            style = create_element(document, 'style', text=critical)
            link.insert_after(style)
            context.register_inlined_style(style, href)

        if mode is False:
            return

        fallback = self._apply_strategy(mode, link, document, href, media, preamble)

        if fallback and self.options.noscript_fallback:
            noscript = create_element(document, 'noscript')
            noscript.append(_stylesheet_link(document, href, media))
            link.insert_after(noscript)

    def _apply_strategy(self, mode, link: Tag, document: BeautifulSoup, href: str,
                        media: Optional[str], preamble: str) -> bool:
        """Mutate the link for the given strategy; return whether it needs a <noscript> fallback."""
        if mode == 'body':
            get_body(document).append(link)
            return False

        if mode == 'media':
            # https://github.com/filamentgroup/loadCSS/blob/af1106cfe0bf70147e22185afa7ead96c01dec48/src/loadCSS.js#L26
            link['rel'] = 'stylesheet'
            del link['as']
            link['media'] = DISABLED_MEDIA
            link['onload'] = f"this.media='{media or 'all'}'"
            return True

        link['rel'] = 'preload'
        link['as'] = 'style'

        if mode == 'swap':
            link['onload'] = "this.rel='stylesheet'"
            return True

        if mode in ('js', 'js-lazy'):
            call = _js_string(href)
            if mode == 'js-lazy':
                call += ',' + _js_string(media or 'all')
            script = create_element(document, 'script', text=f"{preamble}$loadcss({call})")
            link.insert_after(script)
            return True

        get_body(document).append(_stylesheet_link(document, href, media))
        return False

def _stylesheet_link(document: BeautifulSoup, href: str, media: Optional[str]) -> Tag:
    attrs = {'rel': 'stylesheet', 'href': href}
    if media:
        attrs['media'] = media
    return create_element(document, 'link', attrs)

# Exported names
__all__ = ['DeliveryRewriter', 'loader_preamble']
