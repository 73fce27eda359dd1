"""
Herald - Latest Release Feed
Main entry point for the command-line tool.
"""

import sys
from pathlib import Path

try:
    _package = __package__
except NameError:
    _package = None

if not _package:
    _script_path = Path(__file__).resolve()
    src_path = _script_path.parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from herald.core import setup_logging
    from herald.core.validation import validate_and_raise
    from herald.ui.cli import HeraldCLI
else:
    from .core import setup_logging
    from .core.validation import validate_and_raise
    from .ui.cli import HeraldCLI

logger = setup_logging()


def main(argv=None) -> int:
    """Main entry point."""
    logger.debug("Starting Herald")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return 1

        cli = HeraldCLI()
        return cli.run(argv)
    except Exception:
        logger.exception("Unhandled exception occurred")
        return 1
    finally:
        logger.debug("Herald shutting down")


if __name__ == "__main__":
    sys.exit(main())
