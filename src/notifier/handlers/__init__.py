"""
AWS Lambda Handlers Module.

The generic notification handler and its utilities. Every notification Lambda
builds its entry point with ``create_lambda_handler`` and a variant descriptor.
"""

# Re-export handler utilities for convenience
from notifier.handlers.utils.observability import logger, metrics, tracer

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
