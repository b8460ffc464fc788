"""Critical CSS extraction for a single stylesheet."""

from ..utils.css import parse_stylesheet, serialize_stylesheet
from .context import ProcessContext
from .fonts import resolve_fonts
from .options import Options
from .pruner import prune

async def build_critical_css(css_text: str, name: str, context: ProcessContext, options: Options) -> str:
    """Reduce a stylesheet to the part the context's document uses.

    Args:
        css_text: Stylesheet source
        name: Stylesheet name for errors and reports
        context: Current processing context
        options: Run options

    Returns:
        Critical CSS, minified if ``options.compress`` is set

    Raises:
        StylesheetParseError: If the stylesheet cannot be parsed
    """
    sheet = await parse_stylesheet(css_text, name)
    corpus = prune(sheet, context.document)
    resolve_fonts(sheet, context, corpus, options)
    critical = await serialize_stylesheet(sheet, compress=options.compress)
    context.record(name, css_text, critical)
    return critical

__all__ = ['build_critical_css']
