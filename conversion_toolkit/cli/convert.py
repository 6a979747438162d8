"""
CLI for running document conversions.

This module provides a command-line interface to the conversion engine: pick a
conversion by id, pass the input files, and the artifact is written to an
output directory under its suggested file name.
"""

import argparse
import logging
import os
import sys
import time

from .. import config
from ..errors import ConversionError
from ..models import SourceFile
from ..orchestrator import ConversionOrchestrator, JobState
from ..registry import get_registry
from ..utils import print_conversion_summary, setup_logging


def create_parser():
    """Create argument parser for convert command."""
    epilog = """
Examples:
  # Convert a Word document to PDF
  doc-convert word-to-pdf report.docx

  # Combine several images into one PDF, one image per page
  doc-convert image-to-pdf scan1.png scan2.jpg scan3.png

  # Specify output directory
  doc-convert pdf-to-text paper.pdf --output-dir texts/

  # List available conversions
  doc-convert --list
        """

    parser = argparse.ArgumentParser(
        prog="doc-convert",
        description="Convert documents between PDF, Office, image, text and HTML formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog
    )

    parser.add_argument(
        "conversion",
        nargs="?",
        help="Id of the conversion to run (see --list)"
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Input files, processed in the given order"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available conversions and exit"
    )
    parser.add_argument(
        "--output-dir",
        help=f"Output directory (default: {config.DEFAULT_OUTPUT_DIR} next to the first input)"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug messages for each extraction and encoding step"
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only show warnings and errors"
    )

    return parser


def list_conversions():
    """Display available conversions."""
    registry = get_registry()

    print("Available conversions:")
    print("======================")

    for descriptor in registry.list_descriptors():
        files_note = " (multiple files)" if descriptor.multiple else ""
        print(f"\n{descriptor.id}: {descriptor.title}{files_note}")
        print(f"  {descriptor.description}")
        print(f"  Accepts: {', '.join(descriptor.accepted_extensions)}")

    print(f"\nTotal conversions: {len(registry)}")
    print(f"Supported input formats: {', '.join(sorted(config.get_all_supported_formats()))}")


def validate_arguments(args):
    """Validate command line arguments."""
    if args.list:
        return True

    if not args.conversion:
        print("Error: a conversion id is required (unless using --list)")
        return False

    if not args.files:
        print("Error: at least one input file is required")
        return False

    missing = [path for path in args.files if not os.path.isfile(path)]
    if missing:
        print(f"Error: input file not found: {', '.join(missing)}")
        return False

    return True


def get_output_directory(args) -> str:
    """Resolve the directory the artifact is written to."""
    if args.output_dir:
        return args.output_dir
    base_dir = os.path.dirname(os.path.abspath(args.files[0]))
    return os.path.join(base_dir, config.DEFAULT_OUTPUT_DIR)


def read_sources(paths):
    """Load input files in the given order."""
    sources = []
    for path in paths:
        with open(path, 'rb') as f:
            sources.append(SourceFile(f.read(), os.path.basename(path)))
    return sources


def main():
    """Main entry point for doc-convert command."""
    parser = create_parser()
    args = parser.parse_args()

    if args.list:
        list_conversions()
        return

    if not validate_arguments(args):
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose, args.quiet)

    orchestrator = ConversionOrchestrator()
    start_time = time.time()

    try:
        sources = read_sources(args.files)
        logging.info(f"Running {args.conversion} on {len(sources)} file(s)")

        status = orchestrator.convert(args.conversion, sources)
        if status is None:
            logging.info("No input files to convert.")
            sys.exit(0)

        output_path = None
        if status.state is JobState.SUCCEEDED:
            artifact = orchestrator.result.download()
            output_directory = get_output_directory(args)
            try:
                os.makedirs(output_directory, exist_ok=True)
                output_path = os.path.join(output_directory, artifact.suggested_filename)
                with open(output_path, 'wb') as f:
                    f.write(artifact.data)
                logging.debug(f"Saved output to: {output_path}")
            except OSError as e:
                logging.error(f"Failed to save output file: {e}")
                output_path = None

        print_conversion_summary(orchestrator.stats.get_summary(), time.time() - start_time)

        if status.state is JobState.FAILED:
            print(f"\nConversion failed ({status.error.kind}): {status.error_message}")
            sys.exit(1)

        if output_path is None:
            sys.exit(1)

        print(f"\nConversion completed! File saved to: {output_path}")

    except (ConversionError, ValueError) as e:
        logging.error(f"Conversion not started: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Conversion cancelled by user.")
        sys.exit(1)
    except OSError as e:
        logging.error(f"Failed to read input: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
