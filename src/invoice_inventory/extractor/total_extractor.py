"""
Total Extractor
===============
Returns the literal amount that follows the first total label found.
No arithmetic: the value is not checked against the line items.
"""

import re
from typing import Optional, Tuple

from invoice_inventory.extractor.catalog import PatternMatcher, compile_pattern, first_match


# Amount must begin the value: optional ISO code, optional symbol, then a digit
AMOUNT = r'((?:(?:USD|EUR|GBP|JPY)[ \t]*)?[$€£¥＄￥]?[ \t]*-?\d[^\n]*)'
_SEP = r'[ \t]*[:：]?[ \t]*'

TOTAL_LABELS = [
    ("grand_total",  r'\bGrand[ \t]+Total'),
    ("total",        r'(?<![\w-])Total(?:[ \t]+Amount)?'),
    ("amount_due",   r'\b(?:Total[ \t]+)?Amount[ \t]+Due'),
    ("balance",      r'\bBalance(?:[ \t]+Due)?'),
    ("cjk_total",    r'(?:合計(?:金額)?|請求金額|総額)'),
    ("cjk_subtotal", r'小計'),
]


def _value_and_line(m: re.Match) -> Optional[Tuple[str, str]]:
    value = m.group(1).strip()
    if not value:
        return None
    text = m.string
    start = text.rfind('\n', 0, m.start()) + 1
    end = text.find('\n', m.end())
    line = text[start:] if end == -1 else text[start:end]
    return value, line.strip()


TOTAL_CATALOG = [
    PatternMatcher(name, compile_pattern(label + _SEP + AMOUNT), _value_and_line)
    for name, label in TOTAL_LABELS
]


class TotalExtractor:

    def __init__(self, catalog=None):
        self.catalog = list(catalog) if catalog is not None else TOTAL_CATALOG

    def find(self, text: str) -> Optional[Tuple[str, str]]:
        """(value, whole line) of the first labeled total, or None."""
        return first_match(self.catalog, text, owner=self.__class__.__name__)

    def extract(self, text: str) -> Optional[str]:
        found = self.find(text)
        return found[0] if found else None
