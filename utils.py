#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
General helpers for the YouTube MCP server.
"""

import time
from contextlib import contextmanager

from logging_config import StructuredLogger

logger = StructuredLogger(__name__)


@contextmanager
def performance_timer(operation_name: str, threshold_ms: float = 1000.0):
    """Context manager for timing operations with threshold-based logging.

    Logs the duration of the enclosed code block. Logs at INFO level if duration
    exceeds threshold_ms, WARNING if it significantly exceeds it, otherwise DEBUG.

    Args:
        operation_name: A descriptive name for the operation being timed.
        threshold_ms: Threshold in milliseconds. Defaults to one second, a
                      typical upper bound for a single Data API round trip.

    Yields:
        None
    """
    start_time = time.monotonic()
    try:
        yield
    finally:
        duration_ms = (time.monotonic() - start_time) * 1000
        log_data = {
            "operation": operation_name,
            "duration_ms": round(duration_ms, 2),
            "threshold_ms": threshold_ms,
        }

        if duration_ms > threshold_ms * 10:
            logger.warning(f"SLOW OPERATION: '{operation_name}' took {duration_ms:.2f}ms", **log_data)
        elif duration_ms > threshold_ms:
            logger.info(f"Performance watch: '{operation_name}' took {duration_ms:.2f}ms", **log_data)
        else:
            logger.debug(f"Performance: '{operation_name}' completed in {duration_ms:.2f}ms", **log_data)
