"""
Invoice Parser
==============
Runs every field extractor over the same OCR text and assembles one
ParsedInvoice:

  - invoice_id    (InvoiceIdExtractor)
  - invoice_date  (DateNormalizer)
  - items         (LineItemExtractor)
  - total         (TotalExtractor)
  - currency      (CurrencyDetector)

The extractors are independent of each other; a miss in one never
affects another. parse() never raises: anything that is not a
non-empty string yields the empty record ``ParsedInvoice(items=[])``, and
an extractor that fails leaves only its own field empty.
"""

from typing import Any, Optional

from loguru import logger

from invoice_inventory.extractor.currency_detector import CurrencyDetector
from invoice_inventory.extractor.date_normalizer import DateNormalizer
from invoice_inventory.extractor.invoice_id_extractor import InvoiceIdExtractor
from invoice_inventory.extractor.line_item_extractor import LineItemExtractor
from invoice_inventory.extractor.total_extractor import TotalExtractor
from invoice_inventory.models import ParsedInvoice
from invoice_inventory.utils import preview


class InvoiceParser:
    """
    Orchestrates the field extractors.

    Call parse(text) → returns a ParsedInvoice.
    """

    def __init__(
        self,
        invoice_id_extractor: Optional[InvoiceIdExtractor] = None,
        date_normalizer: Optional[DateNormalizer] = None,
        line_item_extractor: Optional[LineItemExtractor] = None,
        total_extractor: Optional[TotalExtractor] = None,
        currency_detector: Optional[CurrencyDetector] = None,
    ):
        self.invoice_id_extractor = invoice_id_extractor or InvoiceIdExtractor()
        self.date_normalizer      = date_normalizer or DateNormalizer()
        self.line_item_extractor  = line_item_extractor or LineItemExtractor()
        self.total_extractor      = total_extractor or TotalExtractor()
        self.currency_detector    = currency_detector or CurrencyDetector(self.total_extractor)

    # ── Public entry point ────────────────────────────────────────────────────

    def parse(self, text: Any) -> ParsedInvoice:
        """
        Extract invoice fields from raw OCR text.

        Returns
        -------
        ParsedInvoice with items always present (possibly empty); other
        fields are None when not recognized.
        """
        if not isinstance(text, str) or not text.strip():
            return ParsedInvoice()

        parsed = ParsedInvoice(
            invoice_id=self._safe("invoice_id", self.invoice_id_extractor.extract, text),
            invoice_date=self._safe("invoice_date", self.date_normalizer.extract, text),
            items=self._safe("items", self.line_item_extractor.extract, text, default=[]),
            total=self._safe("total", self.total_extractor.extract, text),
            currency=self._safe("currency", self.currency_detector.detect, text),
        )

        if parsed.is_empty:
            logger.warning(f"[InvoiceParser] Nothing recognized in: {preview(text)!r}")
        elif not parsed.items:
            logger.warning(f"[InvoiceParser] No line items recognized in: {preview(text)!r}")

        currency = parsed.currency.value if parsed.currency else None
        logger.info(
            f"[InvoiceParser] invoice={parsed.invoice_id!r} "
            f"date={parsed.invoice_date!r} total={parsed.total!r} "
            f"currency={currency!r} "
            f"items={len(parsed.items)}"
        )
        return parsed

    @staticmethod
    def _safe(field, extract, text, default=None):
        """Run one extractor; a failure only empties its own field."""
        try:
            return extract(text)
        except Exception:
            logger.exception(f"[InvoiceParser] {field} extraction failed on: {preview(text)!r}")
            return default

    @staticmethod
    def confidence_score(parsed: ParsedInvoice) -> float:
        """Produce a 0–1 confidence score based on what was extracted."""
        score = 1.0
        if not parsed.items:        score -= 0.35
        if not parsed.total:        score -= 0.25
        if not parsed.invoice_date: score -= 0.15
        if not parsed.invoice_id:   score -= 0.15
        if not parsed.currency:     score -= 0.10
        return round(max(0.0, score), 2)
