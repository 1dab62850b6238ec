"""
FastAPI application entry point.
"""

import logging
from fastapi import FastAPI

from feedgen import __version__
from feedgen.api.router import router as v1_router
from feedgen.config import get_settings
from feedgen.schemas.common import HealthResponse


logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Product Feed Export API",
    description="Exports product catalogs as CSV, XML and Heureka feed files",
    version=__version__
)

# Include routers
app.include_router(v1_router, prefix="/api/v1")


@app.get("/api/v1/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint."""
    return {
        "message": "Product Feed Export API",
        "version": __version__,
        "docs": "/docs"
    }
