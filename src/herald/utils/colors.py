"""
Status line helpers for the Herald CLI.

Success and header lines go to stdout; errors and warnings go to stderr so a
failed refresh stays visible when stdout is redirected. Colors are only used
when the target stream is a terminal.
"""

import sys
from typing import Optional, TextIO

from ..core.config import COLORS


class Colors:
    """ANSI color wrapping for terminal output."""

    @staticmethod
    def colorize(text: str, color: str, stream: Optional[TextIO] = None) -> str:
        """Wrap text in the color's escape codes if stream is a TTY."""
        stream = stream or sys.stdout
        if not stream.isatty():
            return text

        return f"{COLORS.get(color.upper(), '')}{text}{COLORS['END']}"

    @staticmethod
    def bold(text: str, stream: Optional[TextIO] = None) -> str:
        return Colors.colorize(text, "BOLD", stream)

    @staticmethod
    def red(text: str, stream: Optional[TextIO] = None) -> str:
        return Colors.colorize(text, "RED", stream)

    @staticmethod
    def green(text: str, stream: Optional[TextIO] = None) -> str:
        return Colors.colorize(text, "GREEN", stream)

    @staticmethod
    def yellow(text: str, stream: Optional[TextIO] = None) -> str:
        return Colors.colorize(text, "YELLOW", stream)

    @staticmethod
    def cyan(text: str, stream: Optional[TextIO] = None) -> str:
        return Colors.colorize(text, "CYAN", stream)


def print_header(text: str):
    """Print a section header between === markers."""
    print(Colors.bold(Colors.cyan(f"=== {text} ===")))


def print_success(text: str):
    print(Colors.green(f"✓ {text}"))


def print_error(text: str):
    """Print an error line to stderr."""
    print(Colors.red(f"✗ {text}", sys.stderr), file=sys.stderr)


def print_warning(text: str):
    """Print a warning line to stderr."""
    print(Colors.yellow(f"⚠ {text}", sys.stderr), file=sys.stderr)
