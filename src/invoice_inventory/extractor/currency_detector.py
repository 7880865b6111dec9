"""
Currency Detector
=================
One currency per document. A marker on the total line wins; otherwise
the first marker anywhere in the text.

  $ ＄ USD     → USD
  €    EUR     → EUR
  £    GBP     → GBP
  ¥ ￥ 円 JPY  → JPY
"""

import re
from typing import Optional

from loguru import logger

from invoice_inventory.extractor.total_extractor import TotalExtractor
from invoice_inventory.models import Currency


_MARKER = re.compile(r'[$€£¥＄￥円]|(?<![A-Za-z])(?:USD|EUR|GBP|JPY)(?![A-Za-z])')

_CURRENCY_MAP = {
    '$': Currency.USD,
    '＄': Currency.USD,
    'USD': Currency.USD,
    '€': Currency.EUR,
    'EUR': Currency.EUR,
    '£': Currency.GBP,
    'GBP': Currency.GBP,
    '¥': Currency.JPY,
    '￥': Currency.JPY,
    '円': Currency.JPY,
    'JPY': Currency.JPY,
}


class CurrencyDetector:

    def __init__(self, total_extractor: Optional[TotalExtractor] = None):
        self.total_extractor = total_extractor or TotalExtractor()

    def detect(self, text: str) -> Optional[Currency]:
        found = self.total_extractor.find(text)
        if found:
            currency = self._first_marker(found[1])
            if currency:
                logger.debug(f"[CurrencyDetector] {currency.value} from total line")
                return currency
        return self._first_marker(text)

    @staticmethod
    def _first_marker(text: str) -> Optional[Currency]:
        m = _MARKER.search(text)
        if not m:
            return None
        return _CURRENCY_MAP[m.group(0)]
