"""
Main API router for v1.
"""

from fastapi import APIRouter
from feedgen.api import feeds

router = APIRouter()

router.include_router(feeds.router)
