"""
Command-line interface for gen-kit.

Parses arguments, configures logging from GenConfig, and routes to the
command modules.
"""

import argparse
import logging
import sys

from .commands import GENERATORS, list_command, sample_command
from .config import get_config
from .utilities.console import print_error
from .utilities.constants import GenKitError

logger = logging.getLogger(__name__)


class CLIArgumentParser:
    """Argument parser for the gen-kit command line."""

    def __init__(self) -> None:
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="gen-kit", description="Sample values from sized random generators"
        )
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_parsers()

    def parse_args(self, args: list[str] | None = None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def _setup_parsers(self) -> None:
        """Set up command parsers (sample, list)."""
        parser_sample = self.subparsers.add_parser("sample", help="Print sampled values")
        parser_sample.add_argument("generator", choices=sorted(GENERATORS), help="Generator name")
        parser_sample.add_argument("--size", type=int, help="Maximum size (default: from config)")
        parser_sample.add_argument("--count", type=int, help="Number of values (default: from config)")
        parser_sample.add_argument("--seed", type=int, help="Seed for reproducible output")

        self.subparsers.add_parser("list", help="List available generators")


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from GenConfig."""
    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = CLIArgumentParser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.verbose)
        if args.command == "sample":
            result = sample_command(args.generator, args.size, args.count, args.seed)
        elif args.command == "list":
            result = list_command()
        else:
            parser.parser.print_help()
            return 0
    except GenKitError as e:
        logger.error(f"Command failed: {e}")
        print_error(str(e))
        return 1

    return result.exit_code()


if __name__ == "__main__":
    sys.exit(main())
