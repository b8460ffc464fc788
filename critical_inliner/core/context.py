"""Per-call processing state shared by the link and style tasks."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List
from bs4 import BeautifulSoup, Tag

from ..utils.common import format_size, percent_of

logger = logging.getLogger(__name__)

@dataclass
class SheetReport:
    """Size of one stylesheet before and after reduction."""

    name: str
    before: int
    after: int

    @property
    def percent(self) -> int:
        return percent_of(self.after, self.before)

    def to_dict(self) -> Dict[str, object]:
        return {'name': self.name, 'before': self.before, 'after': self.after, 'percent': self.percent}

@dataclass
class ProcessContext:
    """State for a single ``process()`` call.

    Tasks run on one event loop, so the check-and-set helpers below are atomic
    as long as callers do not await between deciding and acting.
    """

    document: BeautifulSoup
    loader_injected: bool = False
    preloaded_fonts: List[str] = field(default_factory=list)
    inlined_styles: Dict[int, str] = field(default_factory=dict)
    reports: List[SheetReport] = field(default_factory=list)

    def claim_loader(self) -> bool:
        """Return True exactly once: for the first caller, which must emit the loader."""
        if self.loader_injected:
            return False
        self.loader_injected = True
        return True

    def claim_font_preload(self, url: str) -> bool:
        """Return True if url has not been preloaded yet, and mark it preloaded."""
        if url in self.preloaded_fonts:
            return False
        self.preloaded_fonts.append(url)
        return True

    def register_inlined_style(self, style: Tag, source: str) -> None:
        self.inlined_styles[id(style)] = source

    def is_inlined_style(self, style: Tag) -> bool:
        return id(style) in self.inlined_styles

    def record(self, name: str, before: str, after: str) -> SheetReport:
        """Record and log the reduction of one stylesheet."""
        report = SheetReport(name, len(before.encode('utf-8')), len(after.encode('utf-8')))
        self.reports.append(report)
        logger.info(
            f"{name}: inlined {format_size(report.after)} "
            f"({report.percent}% of original {format_size(report.before)})"
        )
        return report

# Exported classes
__all__ = ['ProcessContext', 'SheetReport']
