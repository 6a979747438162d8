"""
Logging setup and summary output for the doc-convert command line.

Extractors, encoders and strategies log under their class names and the
orchestrator under its module name, so all of them follow the root level set
here. Chatty library loggers are held at WARNING.
"""

import logging
from typing import Any, Dict

from .. import config


def resolve_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """
    Map the --verbose/--quiet flags to a logging level.

    Args:
        verbose: Show per-step debug messages from the engine
        quiet: Show warnings and errors only

    Returns:
        Logging level for the root logger
    """
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for CLI usage.

    Args:
        verbose: Enable debug output from the engine
        quiet: Suppress informational output
    """
    level = resolve_log_level(verbose, quiet)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)
    logging.getLogger().setLevel(level)

    for name in config.THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def format_size(num_bytes: int) -> str:
    """Human readable size of an artifact."""
    size = float(num_bytes)
    for unit in ('B', 'KB', 'MB'):
        if size < 1024 or unit == 'MB':
            break
        size /= 1024
    return f"{num_bytes} B" if unit == 'B' else f"{size:.1f} {unit}"


def print_conversion_summary(summary: Dict[str, Any], total_time: float) -> None:
    """
    Print the session summary of a ``ConversionStats``.

    Args:
        summary: Result of ``ConversionStats.get_summary()``
        total_time: Wall-clock time of the command in seconds, including file I/O
    """
    print("\n" + "=" * 60)
    print("CONVERSION SUMMARY")
    print("=" * 60)
    print(f"Total jobs: {summary['total_jobs']}")
    print(f"Succeeded: {summary['succeeded']}")
    print(f"Failed: {summary['failed']}")
    print(f"Success rate: {summary['success_rate']:.1f}%")
    print(f"Output size: {format_size(summary['total_output_bytes'])}")
    print(f"Processing time: {summary['total_processing_time']:.2f}s")
    print(f"Total time: {total_time:.2f}s")

    if summary['conversion_counts']:
        print("\nConversions:")
        for conversion_id, count in summary['conversion_counts'].items():
            print(f"  {conversion_id}: {count}")

    if summary['error_counts']:
        print("\nErrors:")
        for kind, count in summary['error_counts'].items():
            print(f"  {kind}: {count}")
