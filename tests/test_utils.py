"""Tests for utility helpers"""
import sys

import pytest
from loguru import logger

from invoice_inventory.utils import format_processing_time, preview, setup_logging, slugify


@pytest.mark.parametrize("name,expected", [
    ("Wine", "wine"),
    ("Red Wine", "red-wine"),
    ("  Pinot \t Noir  ", "pinot-noir"),
    ("ワイン 赤", "ワイン-赤"),
    ("", ""),
])
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_preview_flattens_and_truncates():
    assert preview("Invoice #1\nDate: 2023-10-15") == "Invoice #1 Date: 2023-10-15"
    assert preview("x" * 80, limit=10) == "xxxxxxxxxx..."


def test_format_processing_time():
    assert format_processing_time(456) == "456ms"
    assert format_processing_time(1234) == "1.23s"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    try:
        setup_logging(str(log_file), level="DEBUG")
        logger.debug("hello from test")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert "hello from test" in log_file.read_text(encoding="utf-8")
