"""
Command-line interface for the Bookmark Converter.

This module provides the CLI for converting a Chromium-family bookmarks
file (Chrome, Opera, Edge, Brave, ...) into an HTML page.
"""

import argparse
import logging
import sys
from pathlib import Path

from bookmark_converter import __version__
from bookmark_converter.config.pydantic_config import (
    ConfigurationManager,
    ConverterConfig,
)
from bookmark_converter.core.bookmarks_io import STDOUT, load_document, write_folders
from bookmark_converter.core.data_models import dump_tree
from bookmark_converter.core.tree_builder import parse
from bookmark_converter.utils.error_handler import BookmarkConverterError
from bookmark_converter.utils.logging_setup import setup_logging
from bookmark_converter.utils.validation import (
    validate_config_file,
    validate_input_file,
    validate_output_file,
    validate_title,
)


class CLIInterface:
    """Command line interface for the bookmark converter."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-converter",
            description="Convert a browser bookmarks file to an HTML page",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-converter
  bookmark-converter --input ~/.config/google-chrome/Default/Bookmarks
  bookmark-converter -i Bookmarks -o bookmarks.html --title "My Bookmarks"
  bookmark-converter -i Bookmarks --dump-tree

Configuration:
  Settings can be stored in a TOML or JSON file, passed with --config or
  found at ~/.config/bookmark-converter/config.toml:

  [input]
  path = "~/.config/opera/Bookmarks"

  [output]
  path = "STDOUT"
  title = "Bookmarks"

  [logging]
  level = "WARNING"
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--input",
            "-i",
            help="Bookmarks file pathname (default: ~/.config/opera/Bookmarks)",
        )
        parser.add_argument(
            "--output",
            "-o",
            help=f"Output file pathname, or {STDOUT} (default: {STDOUT})",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--title",
            "-t",
            help="Title of the generated HTML page (default: Bookmarks)",
        )
        parser.add_argument(
            "--dump-tree",
            action="store_true",
            help="Print the parsed folder tree instead of HTML",
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file (.toml or .json) and exit",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log progress information to stderr",
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Log debugging information to stderr",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def load_configuration(self, args: argparse.Namespace) -> ConverterConfig:
        """
        Load the configuration file and apply command line overrides.

        Raises:
            ValidationError: If an argument is invalid
            ConfigurationError: If the configuration is invalid
        """
        config_path = validate_config_file(args.config)

        manager = ConfigurationManager(config_path)
        manager.update_from_cli_args(
            {
                "input_path": args.input,
                "output_path": args.output,
                "title": validate_title(args.title),
                "verbose": args.verbose,
                "debug": args.debug,
            }
        )
        return manager.config

    def _handle_create_config(self, output_path: str) -> int:
        """Write a sample configuration file."""
        path = Path(output_path)
        file_format = "json" if path.suffix.lower() == ".json" else "toml"

        try:
            ConfigurationManager.create_sample_config(path, file_format)
        except OSError as e:
            print(
                f"ERROR: Cannot create configuration file {path}: {e}",
                file=sys.stderr,
            )
            return 1

        print(f"Created configuration file: {path}", file=sys.stderr)
        return 0

    def convert(self, config: ConverterConfig, dump: bool = False) -> None:
        """Read, parse and write the bookmarks described by ``config``."""
        logger = logging.getLogger(__name__)

        input_path = validate_input_file(config.input.path)
        output_path = validate_output_file(config.output.path)

        logger.info(f"Input file: {input_path}")
        logger.info(f"Output: {output_path}")

        tree = parse(load_document(input_path))

        if dump:
            for line in dump_tree(tree.root):
                print(line)
            return

        write_folders(output_path, tree.folders, config.output.title)

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            config = self.load_configuration(parsed_args)
            setup_logging(config.logging.level, config.logging.log_file)

            self.convert(config, dump=parsed_args.dump_tree)
            return 0

        except BookmarkConverterError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            print(f"ERROR: {e}", file=sys.stderr)
            return 1


def main(args=None) -> int:
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
