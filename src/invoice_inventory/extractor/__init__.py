"""
Extractor package: ordered pattern catalogs for invoice OCR text.

Each component recognizes one field; InvoiceParser combines them.

Usage
-----
from invoice_inventory.extractor import InvoiceParser
parsed = InvoiceParser().parse(text)
"""

from invoice_inventory.extractor.catalog import PatternMatcher, first_match
from invoice_inventory.extractor.currency_detector import CurrencyDetector
from invoice_inventory.extractor.date_normalizer import DateNormalizer
from invoice_inventory.extractor.invoice_id_extractor import InvoiceIdExtractor
from invoice_inventory.extractor.invoice_parser import InvoiceParser
from invoice_inventory.extractor.line_item_extractor import LineItemExtractor
from invoice_inventory.extractor.total_extractor import TotalExtractor

__all__ = [
    "PatternMatcher",
    "first_match",
    "CurrencyDetector",
    "DateNormalizer",
    "InvoiceIdExtractor",
    "InvoiceParser",
    "LineItemExtractor",
    "TotalExtractor",
]
