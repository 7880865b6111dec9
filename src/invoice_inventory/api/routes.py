"""
API Routes - invoice parsing endpoints
"""

import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException
from loguru import logger

from invoice_inventory.api.models import ErrorResponse, ParseRequest, ParseResponse
from invoice_inventory.extractor import InvoiceParser
from invoice_inventory.inventory_transformer import InventoryUpdateTransformer
from invoice_inventory.models import InventoryUpdate
from invoice_inventory.utils import format_processing_time

# Create router
router = APIRouter()

parser = InvoiceParser()
transformer = InventoryUpdateTransformer()


@router.post(
    "/invoices/parse",
    response_model=ParseResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    tags=["Invoices"],
)
def parse_invoice(request: ParseRequest):
    """
    **Parse invoice text**

    Extracts invoice ID, date, line items, total and currency from OCR
    text and derives the inventory update.

    **Example:**
    ```bash
    curl -X POST http://localhost:8000/api/v1/invoices/parse \\
      -H "Content-Type: application/json" \\
      -d '{"text": "Invoice #12345\\nItems:\\nWine - 5 bottles - $100"}'
    ```
    """
    start = time.perf_counter()
    try:
        parsed = parser.parse(request.text)
        update = transformer.transform(parsed)
    except Exception as e:
        logger.error(f"Error parsing invoice text: {e}")
        raise HTTPException(500, str(e))

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info(f"Parsed invoice text in {format_processing_time(elapsed_ms)}")

    return ParseResponse(
        status="success",
        invoice=parsed,
        inventory_update=update,
        confidence=parser.confidence_score(parsed),
        processing_time_ms=elapsed_ms,
    )


@router.post(
    "/invoices/inventory-update",
    response_model=InventoryUpdate,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    tags=["Invoices"],
)
def inventory_update(
    invoice: Optional[Dict[str, Any]] = Body(None, description="Parsed invoice record"),
    fallback_date: Optional[str] = None,
):
    """
    **Map a parsed invoice to an inventory update**

    Accepts the `invoice` object returned by `/invoices/parse` (or null).
    Malformed items are skipped.
    """
    if fallback_date is not None and not fallback_date.strip():
        raise HTTPException(400, detail="fallback_date must not be blank")
    return transformer.transform(invoice, fallback_date=fallback_date)
