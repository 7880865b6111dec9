"""
Invoice Records
===============
Pydantic value records produced by the parser and the inventory
transformer.

Field names follow Python conventions; serialized records use the
camelCase aliases (invoiceId, invoiceDate) consumed by the persistence
and translation collaborators. Fields that were not recognized stay
``None`` and are omitted by ``to_record()`` so "not found" never looks
like "found but empty".
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"


class _Record(BaseModel):
    """Immutable base record."""

    class Config:
        frozen = True
        populate_by_name = True

    def to_record(self) -> Dict[str, Any]:
        """Plain dict with aliased keys; absent fields are left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ─── Parser output ────────────────────────────────────────────────────────────

class LineItem(_Record):
    """One recognized product mention."""
    product: Optional[str] = Field(None,  description="Product name as written")
    count: int              = Field(1,     description="Quantity, 1 when none was written")
    unit: Optional[str]     = Field(None,  description="Unit token (bottles, 本, ...)")
    price: Optional[str]    = Field(None,  description="Literal price text, not parsed")


class ParsedInvoice(_Record):
    """Structured result of parsing one invoice's raw text."""
    invoice_id: Optional[str]   = Field(None, alias="invoiceId")
    invoice_date: Optional[str] = Field(None, alias="invoiceDate")
    items: List[LineItem]       = Field(default_factory=list)
    total: Optional[str]        = None
    currency: Optional[Currency] = None

    @property
    def is_empty(self) -> bool:
        return not self.items and all(
            v is None for v in (self.invoice_id, self.invoice_date, self.total, self.currency)
        )


# ─── Transformer output ───────────────────────────────────────────────────────

class InventoryItem(_Record):
    sku: str      = Field(..., min_length=1)
    name: str
    quantity: int
    unit: str


class InventoryUpdate(_Record):
    """Instruction to add the invoice's items to stock."""
    action: str                = "add"
    date: Optional[str]        = None
    items: List[InventoryItem] = Field(default_factory=list)
    source: str                = "invoice"


# ─── Workflow output ──────────────────────────────────────────────────────────

class ProcessedInvoice(_Record):
    """Result of running one invoice through OCR, parsing and translation."""
    file_path: Optional[str]         = Field(None, alias="filePath")
    invoice: ParsedInvoice
    inventory_update: InventoryUpdate = Field(..., alias="inventoryUpdate")
    translation: str                 = Field("",   description="Raw text in the target language")
    source_language: Optional[str]   = Field(None, alias="sourceLanguage")
    confidence: float                = Field(0.0,  ge=0, le=1)
    processed_at: str                = Field(...,  alias="processedAt")
