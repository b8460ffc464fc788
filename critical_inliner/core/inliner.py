"""Critical CSS inlining for whole HTML documents."""

import logging
from typing import List, Mapping, Optional, Tuple
from bs4 import Tag

from ..utils.concurrency import gather_all, run_sync
from ..utils.error import CriticalInlinerError
from ..utils.html import get_text, parse_html, remove_element, serialize_document, set_text
from .context import ProcessContext, SheetReport
from .critical import build_critical_css
from .delivery import DeliveryRewriter
from .options import Options

logger = logging.getLogger(__name__)

class CriticalInliner:
    """Inline critical CSS into HTML documents and defer the rest.

    Example:
        inliner = CriticalInliner(preload='swap', inline_fonts=True)
        html = await inliner.process(html, {'/css/main.css': css})
    """

    def __init__(self, options: Optional[Options] = None, **kwargs):
        """Initialize the inliner.

        Args:
            options: Prepared options; mutually exclusive with kwargs
            **kwargs: Option values, see Options
        """
        if options is not None and kwargs:
            raise CriticalInlinerError("Pass either an Options instance or keyword options, not both")
        self.options = options if options is not None else Options.from_dict(kwargs)
        self.rewriter = DeliveryRewriter(self.options)

    async def process(self, html: str, css_files: Optional[Mapping[str, str]] = None) -> str:
        """Return html with critical CSS inlined and stylesheet loading deferred.

        Args:
            html: HTML document
            css_files: Stylesheet contents keyed by the href used in the document

        Returns:
            Rewritten HTML document

        Raises:
            StylesheetParseError: If any stylesheet cannot be parsed
        """
        html, _ = await self.process_with_report(html, css_files)
        return html

    async def process_with_report(self, html: str,
                                  css_files: Optional[Mapping[str, str]] = None) -> Tuple[str, List[SheetReport]]:
        """Like ``process``, also returning the size report of every reduced stylesheet."""
        css_files = css_files or {}
        document = parse_html(html)
        context = ProcessContext(document)

        try:
            # `external=False` skips processing of external sheets
            if self.options.external:
                links = list(document.select('link[rel="stylesheet"]'))
                await gather_all(self.rewriter.rewrite(link, css_files, context) for link in links)

            styles = [s for s in document.select('style') if not context.is_inlined_style(s)]
            await gather_all(self.process_style(style, context) for style in styles)
        except Exception as e:
            logger.error(f"Error inlining critical CSS: {e}")
            raise

        return serialize_document(document), context.reports

    def process_sync(self, html: str, css_files: Optional[Mapping[str, str]] = None) -> str:
        """Blocking wrapper around ``process`` for callers without an event loop."""
        return run_sync(self.process(html, css_files))

    async def process_style(self, style: Tag, context: ProcessContext) -> None:
        """Reduce a <style> element to its critical rules, removing it if none remain."""
        sheet = get_text(style)
        if not sheet:
            return

        critical = await build_critical_css(sheet, '<style>', context, self.options)

        if not critical.strip():
            remove_element(style)
        else:
            set_text(context.document, style, critical)

# Exported classes
__all__ = ['CriticalInliner']
