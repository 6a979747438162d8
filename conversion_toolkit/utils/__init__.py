"""
Utility modules for the conversion toolkit.
"""

from .cli_common import format_size, print_conversion_summary, resolve_log_level, setup_logging

__all__ = ['setup_logging', 'resolve_log_level', 'format_size', 'print_conversion_summary']
