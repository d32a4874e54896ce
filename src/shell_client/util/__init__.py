"""Utility helpers package."""

from shell_client.util.logging import build_logger, configure_logging, get_logger

__all__ = ["build_logger", "configure_logging", "get_logger"]
