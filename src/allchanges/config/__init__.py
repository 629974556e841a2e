"""Changes aggregator configuration package.

This package provides the typed, validated options of an aggregation run.
"""

from .models import AggregatorConfig, LoggingConfig

__all__ = [
    "AggregatorConfig",
    "LoggingConfig",
]
