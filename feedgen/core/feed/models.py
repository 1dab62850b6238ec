"""
Feed data models.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, List, Dict, Any, Union

from feedgen.core.utils import to_decimal


FEED_FILE_NAME = 'feed'


class FeedFormat(Enum):
    """Supported feed formats. The value doubles as the file extension."""
    CSV = "csv"
    XML = "xml"
    HEUREKA = "xmlh"

    @classmethod
    def resolve(cls, token: Union["FeedFormat", str, None]) -> "FeedFormat":
        """Map a format token to a FeedFormat; unknown tokens fall back to CSV."""
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            return cls.CSV

    @property
    def extension(self) -> str:
        return self.value

    @property
    def filename(self) -> str:
        return f"{FEED_FILE_NAME}.{self.extension}"


@dataclass
class FeedProduct:
    """Read-only product view consumed by the feed writers."""
    sku: str
    name: str = ''
    price: Decimal = Decimal("0")
    final_price: Optional[Decimal] = None  # Defaults to price
    product_url: str = ''
    attributes: Dict[str, Any] = None

    def __post_init__(self):
        self.sku = '' if self.sku is None else str(self.sku)
        if not self.sku:
            raise ValueError("Product SKU must not be empty")
        self.name = '' if self.name is None else str(self.name)
        self.product_url = self.product_url or ''

        self.price = to_decimal(self.price)
        if self.final_price is None:
            self.final_price = self.price
        else:
            self.final_price = to_decimal(self.final_price)
        if self.price < 0 or self.final_price < 0:
            raise ValueError(f"Product {self.sku}: prices must not be negative")

        if self.attributes is None:
            self.attributes = {}

    def get_attribute(self, name: str) -> str:
        """Attribute value as text; '' when the attribute is missing or null."""
        value = self.attributes.get(name)
        if value is None:
            return ''
        return str(value)


@dataclass
class ExportRequest:
    """One export run: where, in which format, and which products."""
    directory: str
    format: FeedFormat
    products: List[FeedProduct] = field(default_factory=list)

    def __post_init__(self):
        self.format = FeedFormat.resolve(self.format)


@dataclass
class ExportResult:
    """Outcome of an export run."""
    success: bool
    message: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def ok(cls, path: Optional[str] = None) -> "ExportResult":
        return cls(success=True, path=path)

    @classmethod
    def failure(cls, message: str) -> "ExportResult":
        return cls(success=False, message=message)

    def to_dict(self) -> Dict[str, Any]:
        result = {'success': self.success}
        if self.message is not None:
            result['message'] = self.message
        if self.path is not None:
            result['path'] = self.path
        return result
