"""
Utility functions for invoice processing
"""

import os
import re
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


_WHITESPACE = re.compile(r'\s+')


def slugify(name: str) -> str:
    """
    Lowercase a product name and join its words with hyphens

    Args:
        name: Product name, any script

    Returns:
        Slug such as "red-wine" or "ワイン"; empty for blank input
    """
    return _WHITESPACE.sub('-', name.strip().lower())


def preview(text: str, limit: int = 50) -> str:
    """Single-line prefix of text for log messages"""
    flat = _WHITESPACE.sub(' ', text).strip()
    if len(flat) <= limit:
        return flat
    return flat[:limit] + "..."


def ensure_directory(dir_path: str) -> str:
    """
    Ensure directory exists, create if it doesn't

    Args:
        dir_path: Directory path

    Returns:
        Absolute path to directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return str(path.absolute())


def format_processing_time(milliseconds: int) -> str:
    """
    Format processing time in human-readable format

    Returns:
        Formatted string (e.g., "1.23s", "456ms")
    """
    if milliseconds < 1000:
        return f"{milliseconds}ms"
    seconds = milliseconds / 1000
    return f"{seconds:.2f}s"


def setup_logging(log_file: Optional[str] = "logs/invoice_inventory.log", level: str = "INFO"):
    """
    Setup logging configuration

    Args:
        log_file: Path to log file, or None for console only
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
        )

    logger.info("Logging initialized")
