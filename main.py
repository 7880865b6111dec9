"""
Invoice Inventory API - Main Application
FastAPI application for invoice text parsing

Run with: python main.py
Access API docs at: http://localhost:8000/docs
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_inventory import __version__
from invoice_inventory.api import HealthResponse, router

# Create FastAPI app
app = FastAPI(
    title="Invoice Inventory API",
    description="Parse invoice OCR text into invoice records and inventory updates",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api/v1")


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "Invoice Inventory API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    return HealthResponse(version=__version__)


if __name__ == "__main__":
    import uvicorn

    from invoice_inventory.config import load_config
    from invoice_inventory.utils import setup_logging

    settings = load_config()['logging']
    setup_logging(settings.get('file'), settings.get('level', 'INFO'))

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
