"""Pytest configuration and fixtures"""
import pytest

from invoice_inventory.config import default_config
from invoice_inventory.extractor import InvoiceParser
from invoice_inventory.inventory_transformer import CounterSuffixSource, InventoryUpdateTransformer


@pytest.fixture
def parser():
    """Invoice parser with the default catalogs"""
    return InvoiceParser()


@pytest.fixture
def transformer():
    """Transformer with a deterministic counter suffix"""
    return InventoryUpdateTransformer(
        suffix_source=CounterSuffixSource(),
        config=default_config(),
    )


@pytest.fixture
def english_invoice_text():
    return (
        "Invoice #12345\n"
        "Date: 2023-10-15\n"
        "Items:\n"
        "Wine - 5 bottles - $100\n"
        "Beer - 10 cans - $50"
    )


@pytest.fixture
def japanese_invoice_text():
    return (
        "インボイス#12345\n"
        "日付: 2023年10月1日\n"
        "アイテム:\n"
        "ワイン 10本 - ¥15000\n"
        "ビール 2箱 - ¥5000\n"
        "合計: ¥20000"
    )


@pytest.fixture
def mixed_invoice_text():
    return (
        "ACME WINE TRADING\n"
        "Invoice No. INV-2023-077\n"
        "Date: October 5th, 2023\n"
        "Items:\n"
        "10 bottles of Red Wine - $150.00\n"
        "Beer (5 boxes) - $60.00\n"
        "Whisky x 3 bottles - $90.00\n"
        "Sake, 2 cases, $40.00\n"
        "ワイン 4本 - ¥8000\n"
        "Gift wrapping - $5.00\n"
        "Thank you for your business\n"
        "Subtotal: $345.00\n"
        "Total: $345.00"
    )
