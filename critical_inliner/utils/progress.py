"""Progress reporting functionality."""

import sys
from typing import Iterable, Iterator, Optional, TypeVar
import colorama
from colorama import Fore, Style
from tqdm import tqdm

T = TypeVar('T')

class ProgressReporter:
    """Progress bar and coloured status messages for the command line."""

    def __init__(self, quiet: bool = False, verbose: bool = False):
        """Initialize the progress reporter.

        Args:
            quiet: Suppress everything except errors
            verbose: Also print debug messages
        """
        self.quiet = quiet
        self.verbose = verbose
        self._bar: Optional[tqdm] = None
        colorama.init()

    def track(self, items: Iterable[T], total: int, description: str = "Processing") -> Iterator[T]:
        """Iterate over items while showing a progress bar (hidden for a single item)."""
        self._bar = tqdm(
            items,
            total=total,
            desc=description,
            unit='file',
            disable=self.quiet or total < 2,
            file=sys.stderr,
        )
        try:
            yield from self._bar
        finally:
            self._bar.close()
            self._bar = None

    def _write(self, message: str) -> None:
        if self._bar is not None:
            self._bar.write(message, file=sys.stderr)
        else:
            print(message, file=sys.stderr)

    def print_info(self, message: str):
        """Print information message"""
        if not self.quiet:
            self._write(f"{Fore.BLUE}Info: {message}{Style.RESET_ALL}")

    def print_success(self, message: str):
        """Print success message"""
        if not self.quiet:
            self._write(f"{Fore.GREEN}Success: {message}{Style.RESET_ALL}")

    def print_error(self, message: str):
        """Print error message"""
        self._write(f"{Fore.RED}Error: {message}{Style.RESET_ALL}")

    def print_debug(self, message: str):
        """Print debug message"""
        if self.verbose and not self.quiet:
            self._write(f"{Style.DIM}Debug: {message}{Style.RESET_ALL}")

# Exported class
__all__ = ['ProgressReporter']
