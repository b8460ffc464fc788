"""Pytest configuration for Critical Inliner tests."""

import asyncio
import logging
import pytest

from ..core.context import ProcessContext
from ..utils.css import parse_stylesheet, serialize_stylesheet
from ..utils.html import parse_html

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def run():
    """Return a helper running a coroutine to completion."""
    return asyncio.run

@pytest.fixture(scope='session')
def sample_html():
    """Return sample HTML content for testing."""
    return (
        '<!DOCTYPE html>'
        '<html lang="en">'
        '<head>'
        '<meta charset="UTF-8">'
        '<title>Test Page</title>'
        '<link rel="stylesheet" href="/css/main.css">'
        '</head>'
        '<body>'
        '<div class="container">'
        '<header class="header"><h1>Test Page</h1></header>'
        '<ul class="nav"><li><a href="#">Home</a></li><li><a href="#">About</a></li></ul>'
        '<p class="intro">Hello</p>'
        '<input type="text" name="q">'
        '</div>'
        '</body>'
        '</html>'
    )

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    body {
        color: #333;
        margin: 0;
    }

    .container {
        max-width: 1200px;
    }

    .sidebar {
        flex: 0 0 300px;
    }

    .nav a:hover {
        color: red;
    }

    @media (max-width: 768px) {
        .container {
            padding: 0;
        }

        .sidebar {
            width: 100%;
        }
    }
    """

@pytest.fixture(scope='session')
def font_css():
    """Return CSS declaring one used and one unused web font."""
    return """
    @font-face {
        font-family: "Used";
        src: url(/fonts/used.woff2) format("woff2");
    }

    @font-face {
        font-family: "Unused";
        src: url(/fonts/unused.woff2) format("woff2");
    }

    p {
        font-family: "Used", sans-serif;
    }

    .missing {
        font-family: "Unused";
    }
    """

@pytest.fixture
def make_context():
    """Return a factory building a processing context for an HTML string."""
    def factory(html: str) -> ProcessContext:
        return ProcessContext(parse_html(html))
    return factory

@pytest.fixture
def parse(run):
    """Return a helper parsing CSS text into a stylesheet."""
    return lambda css: run(parse_stylesheet(css))

@pytest.fixture
def serialize(run):
    """Return a helper serializing a stylesheet in compressed form."""
    return lambda sheet: run(serialize_stylesheet(sheet, compress=True))
