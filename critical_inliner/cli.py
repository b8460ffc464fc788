#!/usr/bin/env python3
"""
Command-line interface for Critical Inliner.
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import orjson

from critical_inliner.core import CriticalInliner, Options
from critical_inliner.utils.concurrency import gather_all, run_sync
from critical_inliner.utils.config import MAX_CSS_SIZE, MAX_HTML_SIZE, VERSION
from critical_inliner.utils.error import CriticalInlinerError
from critical_inliner.utils.file import read_text_file, write_text_file
from critical_inliner.utils.html import parse_html
from critical_inliner.utils.logging import setup_logging
from critical_inliner.utils.path import is_html_file, resolve_stylesheet_path
from critical_inliner.utils.progress import ProgressReporter

logger = logging.getLogger(__name__)

PRELOAD_CHOICES = ['default', 'body', 'media', 'swap', 'js', 'js-lazy', 'none']

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='critical-inliner',
        description='Inline critical CSS into HTML files and defer the remaining stylesheets'
    )

    parser.add_argument(
        'html',
        help='HTML file(s) to process',
        nargs='+'
    )

    # Input/output options
    parser.add_argument(
        '--css-root',
        help="Directory stylesheets are resolved from (default: each HTML file's directory)"
    )
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        '-o', '--output',
        help='Output directory for processed HTML (default: stdout for a single file)'
    )
    output_group.add_argument(
        '--in-place',
        help='Overwrite the input files',
        action='store_true'
    )

    # Processing options
    parser.add_argument(
        '--preload',
        help='Strategy for loading the non-critical stylesheets',
        choices=PRELOAD_CHOICES,
        default='default'
    )
    parser.add_argument(
        '--no-external',
        help='Do not process linked stylesheets',
        action='store_true'
    )
    parser.add_argument(
        '--no-noscript',
        help='Do not add <noscript> fallbacks',
        action='store_true'
    )
    parser.add_argument(
        '--inline-fonts',
        help='Inline critical @font-face rules',
        action='store_true'
    )
    parser.add_argument(
        '--no-preload-fonts',
        help='Do not preload fonts',
        action='store_true'
    )
    fonts_group = parser.add_mutually_exclusive_group()
    fonts_group.add_argument(
        '--fonts',
        help='Inline critical @font-face rules and preload fonts',
        dest='fonts',
        action='store_const',
        const=True
    )
    fonts_group.add_argument(
        '--no-fonts',
        help='Do not inline any @font-face rules',
        dest='fonts',
        action='store_const',
        const=False
    )
    parser.add_argument(
        '--no-compress',
        help='Do not minify the critical CSS',
        action='store_true'
    )
    parser.add_argument(
        '--exclude',
        help='Regular expression of stylesheet hrefs to leave untouched'
    )
    parser.add_argument(
        '--timeout',
        help='Per-file processing timeout in seconds',
        type=float
    )

    # Other options
    parser.add_argument(
        '--format',
        help='Summary output format',
        choices=['text', 'json'],
        default='text'
    )
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    verbosity_group.add_argument(
        '-q', '--quiet',
        help='Only report errors',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help='Also write log records to this file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    args = parser.parse_args(argv)
    if len(args.html) > 1 and not (args.output or args.in_place):
        parser.error('multiple input files require --output or --in-place')
    if args.format == 'json' and not (args.output or args.in_place):
        parser.error('--format json requires --output or --in-place')
    return args

def build_options(args: argparse.Namespace) -> Options:
    """Translate command line arguments into run options."""
    preload = {'default': None, 'none': False}.get(args.preload, args.preload)
    return Options(
        external=not args.no_external,
        preload=preload,
        noscript_fallback=not args.no_noscript,
        inline_fonts=True if args.inline_fonts else None,
        preload_fonts=False if args.no_preload_fonts else None,
        fonts=args.fonts,
        compress=not args.no_compress,
        filter=args.exclude,
    )

async def load_stylesheets(html: str, html_path: str, css_root: Optional[str]) -> Dict[str, str]:
    """Read the local stylesheets linked from a document.

    Args:
        html: Document content
        html_path: Path of the document
        css_root: Directory stylesheets must live in

    Returns:
        Stylesheet contents keyed by href; missing files are left out
    """
    base_dir = os.path.dirname(os.path.abspath(html_path))
    root = os.path.abspath(css_root) if css_root else base_dir

    paths = {}
    for link in parse_html(html).select('link[rel="stylesheet"]'):
        href = link.get('href')
        if not href or href in paths:
            continue
        path = resolve_stylesheet_path(href, root, base_dir)
        if path is None:
            continue
        if not os.path.isfile(path):
            logger.warning(f"Stylesheet not found: {href} ({path})")
            continue
        paths[href] = path

    contents = await gather_all(read_text_file(path, max_size=MAX_CSS_SIZE) for path in paths.values())
    return dict(zip(paths.keys(), contents))

def input_root(html_paths: List[str]) -> str:
    """Return the deepest directory containing every input file."""
    return os.path.commonpath([os.path.dirname(os.path.abspath(path)) for path in html_paths])

def output_path(args: argparse.Namespace, html_path: str, input_dir: str) -> Optional[str]:
    """Return where the processed document goes, None for stdout.

    With --output, the input's path relative to ``input_dir`` is kept so that
    inputs sharing a file name do not overwrite each other.
    """
    if args.in_place:
        return html_path
    if args.output:
        return os.path.join(args.output, os.path.relpath(os.path.abspath(html_path), input_dir))
    return None

async def process_file(inliner: CriticalInliner, html_path: str, args: argparse.Namespace,
                       input_dir: str) -> Dict[str, Any]:
    """Process one HTML file and write the result."""
    if not is_html_file(html_path):
        logger.warning(f"{html_path} does not look like an HTML file")

    html = await read_text_file(html_path, max_size=MAX_HTML_SIZE)
    css_files = await load_stylesheets(html, html_path, args.css_root)
    logger.debug(f"{html_path}: loaded {len(css_files)} stylesheet(s)")

    result, reports = await asyncio.wait_for(
        inliner.process_with_report(html, css_files),
        timeout=args.timeout
    )

    destination = output_path(args, html_path, input_dir)
    if destination is None:
        sys.stdout.write(result)
    else:
        await write_text_file(destination, result)

    return {
        'status': 'success',
        'input': html_path,
        'output': destination,
        'stylesheets': [report.to_dict() for report in reports],
    }

async def run(args: argparse.Namespace, reporter: ProgressReporter) -> List[Dict[str, Any]]:
    """Process every input file, collecting per-file results."""
    inliner = CriticalInliner(build_options(args))
    input_dir = input_root(args.html)
    results = []
    for html_path in reporter.track(args.html, total=len(args.html)):
        try:
            result = await process_file(inliner, html_path, args, input_dir)
            if result['output']:
                reporter.print_success(f"{html_path} -> {result['output']}")
            for report in result['stylesheets']:
                reporter.print_debug(f"{report['name']}: {report['after']} of {report['before']} bytes kept")
        except asyncio.TimeoutError:
            message = f"timed out after {args.timeout} seconds"
            reporter.print_error(f"{html_path}: {message}")
            result = {'status': 'error', 'input': html_path, 'error': message}
        except CriticalInlinerError as e:
            logger.debug(f"Failed to process {html_path}", exc_info=True)
            reporter.print_error(f"{html_path}: {e}")
            result = {'status': 'error', 'input': html_path, 'error': str(e)}
        results.append(result)
    return results

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING
    setup_logging(log_level, args.log_file)

    reporter = ProgressReporter(quiet=args.quiet, verbose=args.verbose)

    try:
        results = run_sync(run(args, reporter))
    except CriticalInlinerError as e:
        reporter.print_error(str(e))
        return 1
    except KeyboardInterrupt:
        reporter.print_error("Operation cancelled by user")
        return 1

    if args.format == 'json':
        sys.stdout.write(orjson.dumps({'files': results}, option=orjson.OPT_INDENT_2).decode('utf-8'))
        sys.stdout.write('\n')
    elif args.output or args.in_place:
        succeeded = sum(1 for result in results if result['status'] == 'success')
        reporter.print_info(f"Processed {succeeded} of {len(results)} file(s)")

    return 0 if all(result['status'] == 'success' for result in results) else 1

if __name__ == '__main__':
    sys.exit(main())
