"""Tests for total extraction and currency detection"""
import pytest

from invoice_inventory.extractor import CurrencyDetector, TotalExtractor
from invoice_inventory.models import Currency


@pytest.fixture
def totals():
    return TotalExtractor()


@pytest.fixture
def detector():
    return CurrencyDetector()


@pytest.mark.parametrize("text, expected", [
    ("Total: $150.00", "$150.00"),
    ("Total: 15000 JPY", "15000 JPY"),
    ("Amount Due: €80", "€80"),
    ("Balance: £12.50", "£12.50"),
    ("Grand Total: USD 1,200.00", "USD 1,200.00"),
    ("Total Amount Due: $5", "$5"),
    ("合計: ¥20000", "¥20000"),
    ("合計 15,000円", "15,000円"),
])
def test_total_labels(totals, text, expected):
    assert totals.extract(text) == expected


def test_total_label_priority(totals):
    text = "Balance: $10.00\nTotal: $110.00"
    assert totals.extract(text) == "$110.00"


def test_subtotal_is_not_total(totals):
    assert totals.extract("Subtotal: $100.00") is None
    assert totals.extract("Subtotal: $100.00\nTotal: $108.00") == "$108.00"


def test_label_without_amount(totals):
    assert totals.extract("Total items listed below") is None


def test_find_returns_line(totals):
    assert totals.find("Invoice #1\nTotal: 15000 JPY\n") == ("15000 JPY", "Total: 15000 JPY")


@pytest.mark.parametrize("text, expected", [
    ("Total: $150.00", Currency.USD),
    ("Total: €150.00", Currency.EUR),
    ("Total: £150.00", Currency.GBP),
    ("Total: ¥15000", Currency.JPY),
    ("合計: 15000円", Currency.JPY),
    ("Total: 15000 JPY", Currency.JPY),
])
def test_currency_markers(detector, text, expected):
    assert detector.detect(text) == expected


def test_total_line_currency_wins(detector):
    text = "Shipping paid in $\nWine - 5 bottles - $100\nTotal: €95.00"
    assert detector.detect(text) == Currency.EUR


def test_first_marker_without_total(detector):
    text = "Wine - 5 bottles - £100\nBeer - 2 cans - $4"
    assert detector.detect(text) == Currency.GBP


def test_currency_code_inside_word_ignored(detector):
    assert detector.detect("Reference EURO2024 shipment") is None


def test_no_currency(detector):
    assert detector.detect("Wine - 5 bottles") is None
