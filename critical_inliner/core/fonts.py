"""@font-face handling: font preloads and critical font inlining."""

import re
import logging
from typing import Optional, Tuple
from cssutils.css import CSSRule, CSSStyleSheet

from ..utils.config import FONT_URL_PATTERN
from ..utils.css import walk_style_rules
from ..utils.html import create_element, get_head
from .context import ProcessContext
from .options import Options

logger = logging.getLogger(__name__)

_FONT_URL_RE = re.compile(FONT_URL_PATTERN)

def font_face_source(rule: CSSRule) -> Tuple[Optional[str], Optional[str]]:
    """Return the (family, first src URL) of a @font-face rule.

    Only the first ``url(...)`` of ``src`` is used; alternative formats are
    not split out.
    """
    family = rule.style.getPropertyValue('font-family') or None
    src = None
    match = _FONT_URL_RE.search(rule.style.getPropertyValue('src'))
    if match:
        src = match.group(2).strip()
    return family, src

def _preload_font(context: ProcessContext, src: str) -> None:
    attrs = {'rel': 'preload', 'as': 'font'}
    if '://' in src:
        attrs['crossorigin'] = 'anonymous'
    attrs['href'] = src
    get_head(context.document).append(create_element(context.document, 'link', attrs))
    logger.debug(f"Preloading font {src}")

def resolve_fonts(sheet: CSSStyleSheet, context: ProcessContext, corpus: str, options: Options) -> None:
    """Preload font files and keep only the @font-face rules in use.

    Runs after ``prune``. A @font-face rule survives only if it names a family
    and a URL, the family text occurs in ``corpus`` and font inlining is
    enabled. The family test is a plain substring search, without quote or
    case normalisation.

    Args:
        sheet: Pruned stylesheet, modified in place
        context: Current processing context (document, preload dedup)
        corpus: Font declaration values returned by ``prune``
        options: Run options
    """

    def visit(rule):
        if rule.type != CSSRule.FONT_FACE_RULE:
            return None

        family, src = font_face_source(rule)

        if src and options.should_preload_fonts and context.claim_font_preload(src):
            _preload_font(context, src)

        if not family or not src or family not in corpus or not options.should_inline_fonts:
            logger.debug(f"Removing @font-face for {family or 'unnamed family'}")
            return False
        return None

    walk_style_rules(sheet, visit)

# Exported functions
__all__ = ['font_face_source', 'resolve_fonts']
