"""Logging and URL helpers shared across packaging-common."""

from packaging_common.utils.logging_config import configure_logging, get_logger, log, log_error
from packaging_common.utils.urls import to_nerf_dart

__all__ = [
    "configure_logging",
    "get_logger",
    "log",
    "log_error",
    "to_nerf_dart",
]
