"""Core functionality for critical CSS extraction and delivery."""

from .context import ProcessContext, SheetReport
from .critical import build_critical_css
from .delivery import DeliveryRewriter, loader_preamble
from .fonts import font_face_source, resolve_fonts
from .inliner import CriticalInliner
from .matcher import matches, strip_pseudos
from .options import Options
from .pruner import prune

__all__ = [
    'CriticalInliner',
    'DeliveryRewriter',
    'Options',
    'ProcessContext',
    'SheetReport',
    'build_critical_css',
    'font_face_source',
    'loader_preamble',
    'matches',
    'prune',
    'resolve_fonts',
    'strip_pseudos',
]
