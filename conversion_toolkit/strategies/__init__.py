"""
Conversion strategies.

This package contains the standard extract-then-encode strategy and the
placeholder strategies, selected by name from a descriptor.
"""

from typing import Dict, Type

from ..errors import UnsupportedPair
from .base import ConversionStrategy
from .placeholders import (
    CompressSummaryStrategy,
    MergeSummaryStrategy,
    PresentationSummaryStrategy,
    SplitSummaryStrategy,
)
from .standard import StandardStrategy

STRATEGIES: Dict[str, Type[ConversionStrategy]] = {
    'standard': StandardStrategy,
    'presentation-summary': PresentationSummaryStrategy,
    'merge-summary': MergeSummaryStrategy,
    'split-summary': SplitSummaryStrategy,
    'compress-summary': CompressSummaryStrategy,
}


def get_strategy(name: str, **kwargs) -> ConversionStrategy:
    """
    Create the strategy registered under ``name``.

    Raises:
        UnsupportedPair: If no strategy has that name
    """
    strategy_class = STRATEGIES.get(name)
    if strategy_class is None:
        raise UnsupportedPair(f"Unknown conversion strategy: {name!r}")
    return strategy_class(**kwargs)


__all__ = [
    'ConversionStrategy',
    'StandardStrategy',
    'PresentationSummaryStrategy',
    'MergeSummaryStrategy',
    'SplitSummaryStrategy',
    'CompressSummaryStrategy',
    'STRATEGIES',
    'get_strategy',
]
