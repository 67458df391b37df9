# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Tabline."""
import logging

logger: logging.Logger = logging.getLogger("tabline")
