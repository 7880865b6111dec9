"""
Invoice → inventory pipeline

Parses OCR text of invoices (English, Japanese or mixed) into structured
records and maps the recognized items to inventory updates.
"""

from typing import Optional

from invoice_inventory.extractor import InvoiceParser
from invoice_inventory.inventory_transformer import (
    ClockSuffixSource,
    CounterSuffixSource,
    InventoryUpdateTransformer,
)
from invoice_inventory.models import (
    Currency,
    InventoryItem,
    InventoryUpdate,
    LineItem,
    ParsedInvoice,
    ProcessedInvoice,
)

__version__ = "1.0.0"

_parser: Optional[InvoiceParser] = None
_transformer: Optional[InventoryUpdateTransformer] = None


def parse_invoice_text(text) -> ParsedInvoice:
    """Parse one invoice's OCR text with the shared default parser."""
    global _parser
    if _parser is None:
        _parser = InvoiceParser()
    return _parser.parse(text)


def to_inventory_update(parsed, fallback_date: Optional[str] = None) -> InventoryUpdate:
    """Map a parsed invoice to an inventory update with the shared default transformer."""
    global _transformer
    if _transformer is None:
        _transformer = InventoryUpdateTransformer()
    return _transformer.transform(parsed, fallback_date=fallback_date)


__all__ = [
    "ClockSuffixSource",
    "CounterSuffixSource",
    "Currency",
    "InventoryItem",
    "InventoryUpdate",
    "InventoryUpdateTransformer",
    "InvoiceParser",
    "LineItem",
    "ParsedInvoice",
    "ProcessedInvoice",
    "parse_invoice_text",
    "to_inventory_update",
]
