"""Configuration utility for Critical Inliner."""

import logging

# Project version
VERSION = "1.0.0"

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB
MAX_HTML_SIZE = 10 * 1024 * 1024    # 10 MB

# Supported file extensions
HTML_EXTENSIONS = ['.html', '.htm', '.xhtml']

# Preload strategies accepted by Options.preload (None selects the default one)
PRELOAD_STRATEGIES = ('body', 'media', 'swap', 'js', 'js-lazy')

# Media query that never matches, used to load a sheet without applying it
DISABLED_MEDIA = 'only x'

# Protocol-relative or absolute network URLs are skipped when no filter is set
NETWORK_URL_PATTERN = r'^(https?:)?//'

# Declarations whose property matches this feed the font-usage corpus
FONT_PROPERTY_PATTERN = r'\bfont\b'

# First url(...) token of a @font-face src
FONT_URL_PATTERN = r'url\s*\(\s*([\'"]?)(.+?)\1\s*\)'

# Pseudo-classes and pseudo-elements, with an optional single-level argument
PSEUDO_SELECTOR_PATTERN = r'::?[a-z-]+(?:\([^)]*\))?(?=[.\[#~+>&^:*]|\s|$)'

# Shared stylesheet loader for the "js" strategies
CSS_LOADER_PREAMBLE = (
    "function $loadcss(u,m,l){(l=document.createElement('link')).rel='stylesheet';"
    "l.href=u;document.head.appendChild(l)}"
)

# "js-lazy" keeps the sheet disabled until it has loaded
LAZY_LOADER_PATCH = "l.media='" + DISABLED_MEDIA + "';l.onload=function(){l.media=m};"

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = logging.INFO

# Exported config
__all__ = [
    'VERSION',
    'MAX_CSS_SIZE', 'MAX_HTML_SIZE',
    'HTML_EXTENSIONS',
    'PRELOAD_STRATEGIES', 'DISABLED_MEDIA',
    'NETWORK_URL_PATTERN', 'FONT_PROPERTY_PATTERN', 'FONT_URL_PATTERN',
    'PSEUDO_SELECTOR_PATTERN',
    'CSS_LOADER_PREAMBLE', 'LAZY_LOADER_PATCH',
    'LOG_FORMAT', 'LOG_DATE_FORMAT', 'LOG_LEVEL',
]
