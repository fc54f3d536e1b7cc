"""
Monitoring infrastructure: structured logging and correlation tracking.
"""

from .logging import (
    CorrelationLogFilter,
    TimestampJSONFormatter,
    correlation_context,
    correlation_id_var,
    generate_correlation_id,
    get_correlation_id,
    setup_structured_logging,
)

__all__ = [
    "CorrelationLogFilter",
    "TimestampJSONFormatter",
    "correlation_context",
    "correlation_id_var",
    "generate_correlation_id",
    "get_correlation_id",
    "setup_structured_logging",
]
