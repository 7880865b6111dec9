"""
API Package
Contains FastAPI routes and models
"""

from invoice_inventory.api.routes import router
from invoice_inventory.api.models import (
    ParseRequest,
    ParseResponse,
    HealthResponse,
    ErrorResponse
)

__all__ = [
    'router',
    'ParseRequest',
    'ParseResponse',
    'HealthResponse',
    'ErrorResponse'
]
