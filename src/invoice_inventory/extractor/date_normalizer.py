"""
Date Normalizer
===============
Finds the invoice date and rewrites Western notations to YYYY-MM-DD.

Catalog (priority order, first pattern that matches anywhere wins;
within one pattern the leftmost occurrence wins):

  iso            2023-10-15        returned as written
  slash_ymd      2023/10/15        → 2023-10-15
  dot_ymd        2023.10.15        → 2023-10-15
  dash_dmy       15-10-2023        → 2023-10-15
  slash_dmy      15/10/2023        → 2023-10-15
  dot_dmy        15.10.2023        → 2023-10-15
  month_name     October 15, 2023  → 2023-10-15   (also "Oct 15th 2023")
  day_month      15 October 2023   → 2023-10-15
  cjk            2023年10月15日     kept verbatim

Day-first forms are read month-first when only that reading is a valid
date (10/25/2023). A substring that is date-shaped but not a real
calendar date is returned unchanged.
"""

import re
from datetime import date
from typing import Optional

from invoice_inventory.extractor.catalog import PatternMatcher, compile_pattern, first_match


_MONTH_NAMES = (
    r'(January|February|March|April|May|June|July|August|September|'
    r'October|November|December|'
    r'Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sept|Sep|Oct|Nov|Dec)'
)

_MONTHS = {
    'jan': 1, 'feb': 2, 'mar': 3, 'apr': 4, 'may': 5, 'jun': 6,
    'jul': 7, 'aug': 8, 'sep': 9, 'oct': 10, 'nov': 11, 'dec': 12,
}

_ORDINAL = r'(?:st|nd|rd|th)?'


def _canonical(year: int, month: int, day: int) -> Optional[str]:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def _ymd(m: re.Match) -> str:
    year, month, day = (int(g) for g in m.group(2, 3, 4))
    return _canonical(year, month, day) or m.group(1)


def _dmy(m: re.Match) -> str:
    first, second, year = (int(g) for g in m.group(2, 3, 4))
    normalized = _canonical(year, second, first)
    if normalized is None and second > 12 >= first:
        normalized = _canonical(year, first, second)
    return normalized or m.group(1)


def _month_name(m: re.Match) -> str:
    month = _MONTHS[m.group(2)[:3].lower()]
    return _canonical(int(m.group(4)), month, int(m.group(3))) or m.group(1)


def _day_month(m: re.Match) -> str:
    month = _MONTHS[m.group(3)[:3].lower()]
    return _canonical(int(m.group(4)), month, int(m.group(2))) or m.group(1)


def _verbatim(m: re.Match) -> str:
    return m.group(1)


def _numeric(sep: str, year_first: bool) -> str:
    s = re.escape(sep)
    if year_first:
        body = rf'(\d{{4}}){s}(\d{{1,2}}){s}(\d{{1,2}})'
    else:
        body = rf'(\d{{1,2}}){s}(\d{{1,2}}){s}(\d{{4}})'
    return rf'(?<!\d)(?<!\d{s})({body})(?!\d|{s}\d)'


DATE_CATALOG = [
    PatternMatcher("iso",        compile_pattern(_numeric('-', True)), _ymd),
    PatternMatcher("slash_ymd",  compile_pattern(_numeric('/', True)), _ymd),
    PatternMatcher("dot_ymd",    compile_pattern(_numeric('.', True)), _ymd),
    PatternMatcher("dash_dmy",   compile_pattern(_numeric('-', False)), _dmy),
    PatternMatcher("slash_dmy",  compile_pattern(_numeric('/', False)), _dmy),
    PatternMatcher("dot_dmy",    compile_pattern(_numeric('.', False)), _dmy),
    PatternMatcher(
        "month_name",
        compile_pattern(r'\b(' + _MONTH_NAMES + r'\.?\s+(\d{1,2})' + _ORDINAL + r',?\s+(\d{4}))(?!\d)'),
        _month_name,
    ),
    PatternMatcher(
        "day_month",
        compile_pattern(r'(?<!\d)((\d{1,2})' + _ORDINAL + r'\s+' + _MONTH_NAMES + r'\.?,?\s+(\d{4}))(?!\d)'),
        _day_month,
    ),
    PatternMatcher("cjk", compile_pattern(r'(\d{4}年\d{1,2}月\d{1,2}日)'), _verbatim),
]


class DateNormalizer:
    """Recognizes one date per document."""

    def __init__(self, catalog=None):
        self.catalog = list(catalog) if catalog is not None else DATE_CATALOG

    def extract(self, text: str) -> Optional[str]:
        return first_match(self.catalog, text, owner=self.__class__.__name__)
