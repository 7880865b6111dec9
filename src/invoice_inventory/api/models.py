"""
API Models - Request and Response schemas
Using Pydantic for automatic validation and documentation
"""

from pydantic import BaseModel, Field
from typing import Optional

from invoice_inventory.models import InventoryUpdate, ParsedInvoice


class ParseRequest(BaseModel):
    """Raw OCR text of one invoice."""
    text: str = Field(..., description="OCR output, any layout or language")


class ParseResponse(BaseModel):
    """Parsed invoice plus the inventory update derived from it."""
    status: str                       = Field("success", description="Response status")
    invoice: ParsedInvoice            = Field(...,       description="Recognized invoice fields")
    inventory_update: InventoryUpdate = Field(...,       alias="inventoryUpdate")
    confidence: float                 = Field(...,       description="Extraction confidence (0-1)", ge=0, le=1)
    processing_time_ms: int           = Field(...,       alias="processingTimeMs")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "status": "success",
                "invoice": {
                    "invoiceId": "12345",
                    "invoiceDate": "2023-10-15",
                    "items": [
                        {"product": "Wine", "count": 5, "unit": "bottles", "price": "$100"},
                    ],
                    "total": "$100",
                    "currency": "USD",
                },
                "inventoryUpdate": {
                    "action": "add",
                    "date": "2023-10-15",
                    "items": [
                        {"sku": "wine-1697371200000", "name": "Wine", "quantity": 5, "unit": "bottles"},
                    ],
                    "source": "invoice",
                },
                "confidence": 1.0,
                "processingTimeMs": 2,
            }
        }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str  = Field("healthy",           description="Health status")
    service: str = Field("invoice-inventory", description="Service name")
    version: str = Field("1.0.0",             description="API version")


class ErrorResponse(BaseModel):
    """Error response."""
    status: str           = Field("error", description="Response status")
    error: str            = Field(...,     description="Error type")
    message: str          = Field(...,     description="Error message")
    detail: Optional[str] = Field(None,    description="Additional details")
