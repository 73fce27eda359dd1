"""
Herald CLI Module
Command-line interface for refreshing and inspecting the latest-release file.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from ..core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    PROJECT_DESCRIPTION,
    OUTPUT_FILE,
    CACHE_FILE,
    CACHE_CONFIG,
    RELEASE_CONFIG,
    ERROR_MESSAGES,
)
from ..core.exceptions import ConfigurationError, HeraldError
from ..core.logger import setup_logging
from ..services.featured_release import DismissState, FeaturedReleaseLoader
from ..services.release_service import ReleaseService
from ..utils.colors import print_error, print_header, print_success, print_warning
from ..utils.expiring_cache import ExpiringCache, JsonFileStore
from .display import DisplayManager


class HeraldCLI:
    """Main CLI class for Herald."""

    def __init__(self, display_manager: Optional[DisplayManager] = None):
        self.display_manager = display_manager or DisplayManager()

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME.lower(),
            description=f"{PROJECT_NAME} - {PROJECT_DESCRIPTION} v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s fetch
  %(prog)s fetch --output site/data/latestRelease.json --dry-run
  %(prog)s show
  %(prog)s dismiss --reset
            """
        )

        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            '--log-level',
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help='Logging level (default: HERALD_LOG_LEVEL or INFO)'
        )

        subparsers = parser.add_subparsers(
            dest='mode',
            help='Available modes',
            required=True
        )

        fetch_parser = subparsers.add_parser(
            'fetch',
            help='Fetch the latest release from Spotify and update the data file'
        )
        self._add_fetch_args(fetch_parser)

        show_parser = subparsers.add_parser(
            'show',
            help='Show the release currently in the data file'
        )
        self._add_output_arg(show_parser)
        self._add_cache_arg(show_parser)

        dismiss_parser = subparsers.add_parser(
            'dismiss',
            help='Hide the featured release banner for 24 hours'
        )
        self._add_cache_arg(dismiss_parser)
        dismiss_parser.add_argument(
            '--reset',
            action='store_true',
            help='Clear the dismiss flag instead of setting it'
        )

        return parser

    def _add_output_arg(self, parser: argparse.ArgumentParser):
        parser.add_argument(
            '--output', '-o',
            type=Path,
            default=OUTPUT_FILE,
            help=f'Path of the latest-release JSON file (default: {OUTPUT_FILE})'
        )

    def _add_cache_arg(self, parser: argparse.ArgumentParser):
        parser.add_argument(
            '--cache-file',
            type=Path,
            default=CACHE_FILE,
            help=f'Path of the local cache file (default: {CACHE_FILE})'
        )

    def _add_fetch_args(self, parser: argparse.ArgumentParser):
        """Add arguments for fetch mode."""
        self._add_output_arg(parser)
        parser.add_argument(
            '--artist-id', '-a',
            default=RELEASE_CONFIG["ARTIST_ID"],
            help='Spotify artist ID'
        )
        parser.add_argument(
            '--market', '-m',
            default=RELEASE_CONFIG["MARKET"],
            help='Two-letter market code (default: %(default)s)'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Select and show the release without writing the file'
        )

    def handle_fetch(self, args: argparse.Namespace) -> int:
        print_header("Fetching latest release from Spotify")
        service = ReleaseService(
            output_file=args.output,
            artist_id=args.artist_id,
            market=args.market,
        )
        try:
            result = service.refresh(dry_run=args.dry_run)
        except ConfigurationError as e:
            print_error(f"Error: {e}")
            return 1
        except HeraldError as e:
            print_error(f"Fatal error: {e}")
            print_warning(ERROR_MESSAGES["NOT_UPDATED"])
            return 1

        self.display_manager.display_refresh_result(result)
        print_success("Success!")
        return 0

    def handle_show(self, args: argparse.Namespace) -> int:
        store = JsonFileStore(args.cache_file)
        loader = FeaturedReleaseLoader(
            data_file=args.output,
            cache=ExpiringCache(store, ttl_ms=CACHE_CONFIG["FEATURED_RELEASE_TTL_MS"]),
        )
        dismiss_state = DismissState(ExpiringCache(store, ttl_ms=CACHE_CONFIG["DISMISS_TTL_MS"]))
        try:
            record = loader.load()
        except HeraldError as e:
            print_error(str(e))
            return 1

        self.display_manager.display_featured_release(record, dismissed=dismiss_state.is_dismissed())
        return 0

    def handle_dismiss(self, args: argparse.Namespace) -> int:
        store = JsonFileStore(args.cache_file)
        dismiss_state = DismissState(ExpiringCache(store, ttl_ms=CACHE_CONFIG["DISMISS_TTL_MS"]))
        if args.reset:
            dismiss_state.reset()
            print_success("Featured release banner restored")
        else:
            dismiss_state.dismiss()
            print_success("Featured release banner hidden for 24 hours")
        return 0

    def run(self, args: List[str] = None) -> int:
        """Run the CLI with given arguments and return the exit status."""
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)

        if parsed_args.log_level:
            setup_logging(parsed_args.log_level)

        handlers = {
            'fetch': self.handle_fetch,
            'show': self.handle_show,
            'dismiss': self.handle_dismiss,
        }

        try:
            return handlers[parsed_args.mode](parsed_args)
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
