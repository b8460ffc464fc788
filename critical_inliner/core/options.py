"""Run options for critical CSS inlining."""

import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Mapping, Optional, Union
from typing_extensions import Literal

from ..utils.config import PRELOAD_STRATEGIES
from ..utils.error import ConfigurationError

PreloadStrategy = Union[None, Literal[False], Literal['body', 'media', 'swap', 'js', 'js-lazy']]
UrlFilter = Union[None, str, re.Pattern, Callable[[str], Any]]

# camelCase spellings accepted by Options.from_dict
OPTION_ALIASES = {
    'noscriptFallback': 'noscript_fallback',
    'inlineFonts': 'inline_fonts',
    'preloadFonts': 'preload_fonts',
}

def _resolve_filter(url_filter: UrlFilter) -> Optional[Callable[[str], Any]]:
    if url_filter is None:
        return None
    if isinstance(url_filter, str):
        try:
            url_filter = re.compile(url_filter)
        except re.error as e:
            raise ConfigurationError(f"Invalid filter pattern {url_filter!r}: {e}")
    if isinstance(url_filter, re.Pattern):
        return url_filter.search
    if callable(url_filter):
        return url_filter
    raise ConfigurationError(f"Invalid filter: {url_filter!r}")

@dataclass(frozen=True)
class Options:
    """Options controlling how critical CSS is inlined.

    ``fonts`` is a shorthand: ``True`` turns both font inlining and font
    preloading on, ``False`` turns inlining off and leaves preloading to
    ``preload_fonts``. The effective values are ``should_inline_fonts`` and
    ``should_preload_fonts``.

    ``filter`` excludes every stylesheet URL it matches. It may be a callable,
    a regular expression or a pattern string. Without a filter, network URLs
    are excluded.
    """

    external: bool = True
    preload: PreloadStrategy = None
    noscript_fallback: bool = True
    inline_fonts: Optional[bool] = None
    preload_fonts: Optional[bool] = None
    fonts: Optional[bool] = None
    compress: bool = True
    filter: UrlFilter = None

    should_inline_fonts: bool = field(init=False, repr=False)
    should_preload_fonts: bool = field(init=False, repr=False)
    url_filter: Optional[Callable[[str], Any]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        preload = self.preload
        if preload == 'default':
            preload = None
        if preload is not None and preload is not False and preload not in PRELOAD_STRATEGIES:
            raise ConfigurationError(f"Unknown preload strategy: {preload!r}")
        object.__setattr__(self, 'preload', preload)

        if self.fonts is True:
            inline, preload_fonts = True, True
        elif self.fonts is False:
            inline = False
            preload_fonts = self.preload_fonts is not False
        else:
            inline = bool(self.inline_fonts)
            preload_fonts = self.preload_fonts is not False
        object.__setattr__(self, 'should_inline_fonts', inline)
        object.__setattr__(self, 'should_preload_fonts', preload_fonts)
        object.__setattr__(self, 'url_filter', _resolve_filter(self.filter))

    @classmethod
    def from_dict(cls, values: Optional[Mapping[str, Any]] = None) -> 'Options':
        """Build options from a mapping, accepting camelCase keys.

        Raises:
            ConfigurationError: If a key is not a known option
        """
        known = {f.name for f in fields(cls) if f.init}
        kwargs: Dict[str, Any] = {}
        for key, value in (values or {}).items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

# Exported names
__all__ = ['Options', 'PreloadStrategy', 'UrlFilter']
