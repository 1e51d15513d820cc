"""
Logging configuration and utilities for the birthday app.
"""
from .config import configure_logging, get_logger, get_query_logger

__all__ = ["configure_logging", "get_logger", "get_query_logger"]
