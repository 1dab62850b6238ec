"""
Feed export schemas.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class FeedProductIn(BaseModel):
    """Product record as sent by the catalog side."""
    sku: str = Field(min_length=1)
    name: str = ''
    price: Decimal = Field(default=Decimal("0"), ge=0)
    final_price: Optional[Decimal] = Field(default=None, ge=0)  # Defaults to price
    product_url: str = ''
    attributes: Dict[str, Any] = Field(default_factory=dict)


class FeedExportCreate(BaseModel):
    """Feed export request."""
    directory: str = Field(min_length=1, description="Directory relative to the application root")
    format: str = Field(default="csv", description="csv, xml or xmlh; anything else is written as csv")
    products: List[FeedProductIn] = Field(default_factory=list)


class FeedExportResponse(BaseModel):
    """Feed export outcome."""
    success: bool
    message: Optional[str] = None
    path: Optional[str] = None
    filename: Optional[str] = None
