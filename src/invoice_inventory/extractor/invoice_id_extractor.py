"""
Invoice-ID Extractor
====================
Label catalog, tried in this order (first label found anywhere wins):

  Invoice #A123 / Invoice# A123 / Invoice #: A123
  Invoice: A123
  Invoice No. A123 / Invoice Number: A123
  Invoice ID: A123
  Receipt #A123
  請求書番号 A123 / インボイス#A123

A token must contain at least one digit.
"""

from typing import Optional

from invoice_inventory.extractor.catalog import PatternMatcher, compile_pattern, first_match


_TOKEN = r'((?=[A-Z0-9\-_/]*\d)[A-Z0-9][A-Z0-9\-_/]*)'
_GAP = r'[ \t]*'
# "#", ":" or "#:" between a label and its token
_MARK = _GAP + r'#?' + _GAP + r'[:：]?' + _GAP

INVOICE_ID_CATALOG = [
    PatternMatcher("invoice_hash",   compile_pattern(r'\bInvoice' + _GAP + r'#' + _GAP + r'[:：]?' + _GAP + _TOKEN)),
    PatternMatcher("invoice_colon",  compile_pattern(r'\bInvoice' + _GAP + r'[:：]' + _GAP + _TOKEN)),
    PatternMatcher("invoice_no",     compile_pattern(r'\bInvoice[ \t]+(?:No\.?|Number)' + _MARK + _TOKEN)),
    PatternMatcher("invoice_id",     compile_pattern(r'\bInvoice[ \t]+ID' + _MARK + _TOKEN)),
    PatternMatcher("receipt_hash",   compile_pattern(r'\bReceipt' + _GAP + r'(?:#|No\.?)' + _GAP + r'[:：]?' + _GAP + _TOKEN)),
    PatternMatcher("cjk_invoice",    compile_pattern(r'(?:請求書|インボイス)' + _GAP + r'(?:番号|No\.?)?' + _MARK + _TOKEN)),
]


class InvoiceIdExtractor:

    def __init__(self, catalog=None):
        self.catalog = list(catalog) if catalog is not None else INVOICE_ID_CATALOG

    def extract(self, text: str) -> Optional[str]:
        return first_match(self.catalog, text, owner=self.__class__.__name__)
