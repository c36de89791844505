#!/usr/bin/env python3
"""
csguard CLI - calculate and validate file checksums from the command line.
Two subcommands share the same engine (ChecksumCommand); this module only maps
flags to ChecksumParams, prints results and turns errors into exit code 1.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import yaml
except ImportError:
    _MISSING_DEPS.append("PyYAML")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install .", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from csguard.core.errors import ChecksumError
from csguard.core.models import AlgorithmId, ChecksumParams, RunMode
from csguard.commands import ChecksumCommand
from csguard.aliases import (
    ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, OUTPUT_HELP_TEXT, EPILOG_TEXT
)


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser whose usage errors exit with code 1 like every other configuration error."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        CLIApplication.error_exit(message)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        common = ArgumentParser(add_help=False)
        common.add_argument(
            "--output", "-o",
            default="",
            type=str,
            help=OUTPUT_HELP_TEXT
        )
        common.add_argument(
            "--algorithm", "-a",
            default=AlgorithmId.MD5.value,
            metavar="{" + ",".join(ALGORITHM_CHOICES) + "}",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        common.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only log errors"
        )
        common.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log every hashed file and traversal details"
        )

        parser = ArgumentParser(
            prog="csguard",
            description="csguard - calculate and validate file checksums",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        calculate = subparsers.add_parser(
            RunMode.CALCULATE.value,
            parents=[common],
            formatter_class=argparse.RawTextHelpFormatter,
            help="calculate checksum"
        )
        calculate.add_argument(
            "--input-file",
            default="",
            type=str,
            dest="input_file",
            help="Path to the input file for which to calculate the checksum."
        )
        calculate.add_argument(
            "--input-folder",
            default="",
            type=str,
            dest="input_folder",
            help="Path to the input folder containing files for which to calculate the checksum."
        )

        validate = subparsers.add_parser(
            RunMode.VALIDATE.value,
            parents=[common],
            formatter_class=argparse.RawTextHelpFormatter,
            help="validate checksum"
        )
        validate.add_argument(
            "--input-file",
            default="",
            type=str,
            dest="input_file",
            help="Path to the input file for which to validate the checksum."
        )
        validate.add_argument(
            "--checksum",
            default="",
            type=str,
            help="Checksum value to validate against the calculated checksum of the input file."
        )
        validate.add_argument(
            "--checksum-file",
            default="",
            type=str,
            dest="checksum_file",
            help="Path to the file containing checksums to validate. Supported formats: '.txt', '.json', '.yaml'."
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> ChecksumParams:
        """Create ChecksumParams from CLI arguments."""
        try:
            mode = RunMode(args.command)
            return ChecksumParams(
                mode=mode,
                input_file=args.input_file,
                input_folder=getattr(args, "input_folder", ""),
                checksum=getattr(args, "checksum", ""),
                checksum_file=getattr(args, "checksum_file", ""),
                output=args.output,
                algorithm=AlgorithmId.parse(args.algorithm),
            )
        except ValueError as e:
            self.error_exit(str(e))

    def configure_logging(self) -> None:
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger().setLevel(level)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point: configure, compute, persist."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        params = self.create_params(args)

        try:
            command = ChecksumCommand(params)
            if params.mode == RunMode.CALCULATE:
                result = command.calculate()
            else:
                result = command.validate()
            command.persist(result)
        except (ChecksumError, OSError) as e:
            self.error_exit(str(e))

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
