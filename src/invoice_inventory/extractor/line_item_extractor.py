"""
Line-Item Extractor
===================
Recognizes product lines. Each candidate line is matched against the
grammar catalog below in order; the first grammar that covers the whole
line produces one LineItem and the line is consumed.

Grammars
--------
  quantity_first   10 bottles of Wine [- $150.00]
  product_first    Wine - 10 bottles [- $150.00]
  parenthetical    Wine (10 bottles) [- $150.00]
  multiplicative   Wine x 10 bottles [- $150.00]
  comma_separated  Wine, 10 bottles[, $150.00]
  cjk              ワイン 10本 [- ¥15000]
  priced_product   Wine - $150.00            (count defaults to 1)

Item zone
---------
When an items header ("Items:", "Products", "商品", ...) opens a line,
only the text after it is a candidate, including anything written on
the header line after the colon. Without a header the
whole text is scanned. Total, tax, date and invoice-label lines are
never items.
"""

import re
from typing import Dict, List, Optional

from loguru import logger

from invoice_inventory.extractor.catalog import PatternMatcher, compile_pattern
from invoice_inventory.models import LineItem


# ─── Tokens ───────────────────────────────────────────────────────────────────

_CODE = r'(?:USD|EUR|GBP|JPY)'
_SYMBOL = r'[$€£¥＄￥]'
_NUMBER = r'\d[\d,]*(?:\.\d+)?'

# Any price-shaped token: "$150.00", "15000 JPY", "10000円", "USD 20", "150"
_PRICE = (
    r'(?P<price>(?:' + _CODE + r'[ \t]*)?' + _SYMBOL + r'?[ \t]*' + _NUMBER
    + r'(?:[ \t]*(?:' + _CODE + r'|円))?)'
)
# Price carrying an explicit currency marker (needed when no count is written)
_MARKED_PRICE = (
    r'(?P<price>' + _SYMBOL + r'[ \t]*' + _NUMBER
    + r'|' + _CODE + r'[ \t]*' + _NUMBER
    + r'|' + _NUMBER + r'[ \t]*(?:' + _CODE + r'|円))'
)

_COUNT = r'(?P<count>\d+)'
_UNIT = r'(?P<unit>(?!(?:USD|EUR|GBP|JPY|円)(?![^\W\d_]))[^\W\d_]+\.?)'
_CJK_UNIT = r'(?P<unit>[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff]{1,3})'
_DASH = r'[ \t]+[-–][ \t]+'
_PRICE_TAIL = r'(?:' + _DASH + _PRICE + r')?'

_HAS_LETTER = re.compile(r'[^\W\d_]')

_ITEMS_HEADER = re.compile(
    r'^[ \t]*(?:Items?(?:[ \t]+List)?|Products?|商品(?:一覧)?|品目|明細|アイテム)[ \t]*(?:[:：][ \t]*|[ \t\r]*$)',
    re.IGNORECASE | re.MULTILINE,
)

_NON_ITEM_LINE = re.compile(
    r'^(?:(?:Grand[ \t]+)?Total|Sub[ \t-]*total|Amount[ \t]+Due|Balance|Tax|VAT|'
    r'Date|Due[ \t]+Date|Invoice|Receipt)\b'
    r'|^(?:合計|小計|請求金額|総額|税|消費税|日付|日期|請求書|インボイス)',
    re.IGNORECASE,
)


def _build(m: re.Match) -> Optional[LineItem]:
    fields: Dict[str, Optional[str]] = m.groupdict()
    product = (fields.get('product') or '').strip()
    if not _HAS_LETTER.search(product):
        return None
    count = fields.get('count')
    try:
        quantity = int(count) if count else 1
    except ValueError:
        # digit run too long for int()
        return None
    unit = (fields.get('unit') or '').strip() or None
    price = (fields.get('price') or '').strip() or None
    return LineItem(
        product=product,
        count=quantity,
        unit=unit,
        price=price,
    )


LINE_ITEM_CATALOG = [
    PatternMatcher(
        "quantity_first",
        compile_pattern(_COUNT + r'[ \t]+' + _UNIT + r'[ \t]+(?:of|de)[ \t]+(?P<product>.+?)' + _PRICE_TAIL),
        _build,
    ),
    PatternMatcher(
        "product_first",
        compile_pattern(r'(?P<product>[^()]+?)' + _DASH + _COUNT + r'(?:[ \t]*' + _UNIT + r')?' + _PRICE_TAIL),
        _build,
    ),
    PatternMatcher(
        "parenthetical",
        compile_pattern(
            r'(?P<product>[^()]+?)[ \t]*\([ \t]*' + _COUNT + r'(?:[ \t]*(?P<unit>[^()\d]+?))?[ \t]*\)'
            + r'(?:[ \t]*[-–][ \t]*' + _PRICE + r')?'
        ),
        _build,
    ),
    PatternMatcher(
        "multiplicative",
        compile_pattern(
            r'(?P<product>.+?)[ \t]+[x×][ \t]*' + _COUNT + r'(?:[ \t]*' + _UNIT + r')?'
            + r'(?:(?:' + _DASH + r'|[ \t]+)' + _PRICE + r')?'
        ),
        _build,
    ),
    PatternMatcher(
        "comma_separated",
        compile_pattern(
            r'(?P<product>[^,、]+?)[ \t]*[,、][ \t]*' + _COUNT + r'(?:[ \t]*' + _UNIT + r')?'
            + r'(?:[ \t]*[,、][ \t]*' + _PRICE + r')?'
        ),
        _build,
    ),
    PatternMatcher(
        "cjk",
        compile_pattern(
            r'(?P<product>.+?)[ \t]*' + _COUNT + r'[ \t]*' + _CJK_UNIT
            + r'(?:[ \t]*[-–][ \t]*' + _PRICE + r')?'
        ),
        _build,
    ),
    PatternMatcher(
        "priced_product",
        compile_pattern(r'(?P<product>.+?)' + _DASH + _MARKED_PRICE),
        _build,
    ),
]


class LineItemExtractor:
    """Turns the item zone of an invoice into an ordered list of LineItem."""

    def __init__(self, catalog=None):
        self.catalog = list(catalog) if catalog is not None else LINE_ITEM_CATALOG

    def extract(self, text: str) -> List[LineItem]:
        items: List[LineItem] = []
        for line in self._candidate_lines(text):
            item = self._match_line(line)
            if item is not None:
                items.append(item)

        logger.debug(f"[LineItemExtractor] {len(items)} items found")
        return items

    def _candidate_lines(self, text: str) -> List[str]:
        header = _ITEMS_HEADER.search(text)
        zone = text[header.end():] if header else text
        lines = []
        for raw in zone.splitlines():
            s = raw.strip()
            if not s or _NON_ITEM_LINE.match(s):
                continue
            lines.append(s)
        return lines

    def _match_line(self, line: str) -> Optional[LineItem]:
        for matcher in self.catalog:
            item = matcher.match_line(line)
            if item is not None:
                logger.debug(f"[LineItemExtractor] {matcher.name}: {line!r}")
                return item
        return None
