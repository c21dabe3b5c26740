"""
Core utilities and configuration for the product console.

This package provides settings, logging configuration and the database layer.
"""

from product_console.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
