"""
Inventory Update Transformer
============================
Turns a ParsedInvoice into an InventoryUpdate ("add these items").

SKUs are ``<slug>-<suffix>``: the slug is the lowercased product name
with whitespace runs replaced by hyphens ("item" for unnamed products),
the suffix comes from an injectable SuffixSource. Uniqueness inside one
call is enforced here regardless of the source; across calls it depends
on the source (the clock and counter sources never repeat within a
process).
"""

import itertools
import threading
import time
from typing import Any, Callable, Iterable, List, Mapping, Optional, Set, Union

from loguru import logger
from pydantic import ValidationError

from invoice_inventory.config import load_config
from invoice_inventory.models import InventoryItem, InventoryUpdate, LineItem, ParsedInvoice
from invoice_inventory.utils import slugify


SuffixSource = Callable[[], str]


class ClockSuffixSource:
    """
    Millisecond wall-clock suffix, bumped when the clock has not moved
    so consecutive calls never return the same value.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            now = int(self._clock() * 1000)
            self._last = now if now > self._last else self._last + 1
            return str(self._last)


class CounterSuffixSource:
    """Monotonic integer suffix, zero-padded."""

    def __init__(self, start: int = 1, width: int = 6):
        self._counter = itertools.count(start)
        self._width = width
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            return str(next(self._counter)).zfill(self._width)


_SUFFIX_SOURCES = {
    'clock':   ClockSuffixSource,
    'counter': CounterSuffixSource,
}


ParsedLike = Union[ParsedInvoice, Mapping[str, Any], None]


class InventoryUpdateTransformer:
    """
    Maps recognized line items to inventory items.

    Parameters
    ----------
    suffix_source : callable returning str, optional
        SKU suffix generator. Defaults to the source named by
        ``inventory.sku_suffix`` in the config ('clock' or 'counter').
    config : dict, optional
        Full configuration dict (see config.load_config).
    """

    def __init__(self, suffix_source: Optional[SuffixSource] = None, config: Optional[dict] = None):
        settings = (config or load_config()).get('inventory', {})
        self.action               = settings.get('action', 'add')
        self.unknown_product_name = settings.get('unknown_product_name', 'Unknown Product')
        self.default_unit         = settings.get('default_unit', 'each')
        self.sku_placeholder      = settings.get('sku_placeholder', 'item')

        if suffix_source is None:
            kind = settings.get('sku_suffix', 'clock')
            if kind not in _SUFFIX_SOURCES:
                raise ValueError(f"Unknown sku_suffix: {kind!r}. Allowed: {list(_SUFFIX_SOURCES)}")
            suffix_source = _SUFFIX_SOURCES[kind]()
        self.suffix_source = suffix_source

    # ── Public entry point ────────────────────────────────────────────────────

    def transform(self, parsed: ParsedLike, fallback_date: Optional[str] = None) -> InventoryUpdate:
        """
        Build the inventory update for one parsed invoice.

        Args:
            parsed: ParsedInvoice, a decoded JSON mapping of one, or None
            fallback_date: date to use when the invoice has none

        Returns:
            InventoryUpdate; items is empty when parsed is None
        """
        if parsed is None:
            return InventoryUpdate(action=self.action)

        if isinstance(parsed, ParsedInvoice):
            invoice_date = parsed.invoice_date
            line_items: Iterable[Any] = parsed.items
        elif isinstance(parsed, Mapping):
            invoice_date = parsed.get('invoiceDate', parsed.get('invoice_date'))
            if not isinstance(invoice_date, str):
                invoice_date = None
            line_items = parsed.get('items')
            if not isinstance(line_items, (list, tuple)):
                line_items = []
        else:
            logger.warning(f"[InventoryUpdateTransformer] Unsupported input type: {type(parsed).__name__}")
            return InventoryUpdate(action=self.action)

        issued: Set[str] = set()
        items: List[InventoryItem] = []
        for position, raw in enumerate(line_items):
            line_item = self._coerce(raw, position)
            if line_item is None:
                continue
            items.append(self._to_inventory_item(line_item, issued))

        logger.debug(f"[InventoryUpdateTransformer] {len(items)} inventory items")
        return InventoryUpdate(
            action=self.action,
            date=invoice_date or fallback_date or None,
            items=items,
        )

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _coerce(self, raw: Any, position: int) -> Optional[LineItem]:
        if raw is None:
            logger.warning(f"[InventoryUpdateTransformer] Skipping empty item at position {position}")
            return None
        if isinstance(raw, LineItem):
            return raw
        if isinstance(raw, Mapping):
            raw = {k: v for k, v in raw.items() if v is not None}
        try:
            return LineItem.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"[InventoryUpdateTransformer] Skipping invalid item at position {position}: "
                f"{e.error_count()} validation error(s)"
            )
            return None

    def _to_inventory_item(self, line_item: LineItem, issued: Set[str]) -> InventoryItem:
        product = (line_item.product or '').strip()
        name = product or self.unknown_product_name
        slug = slugify(product) if product else self.sku_placeholder

        sku = f"{slug}-{self.suffix_source()}"
        duplicate = 2
        base = sku
        while sku in issued:
            sku = f"{base}-{duplicate}"
            duplicate += 1
        issued.add(sku)

        return InventoryItem(
            sku=sku,
            name=name,
            quantity=line_item.count,
            unit=line_item.unit or self.default_unit,
        )
