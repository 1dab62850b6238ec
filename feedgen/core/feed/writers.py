"""
Feed writers: one per FeedFormat, each streaming products into an open sink.

Field values are written verbatim. The CSV writer does not escape the '|'
separator or newlines and the XML writers do not escape markup characters,
so downstream consumers keep receiving byte-compatible files. Products whose
values contain those characters produce ambiguous or malformed output.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, Type

from feedgen.core.utils import format_decimal, strip_tags
from .errors import FeedWriteError
from .file_sink import FileSink
from .models import FeedFormat, FeedProduct


logger = logging.getLogger(__name__)

FIELD_SEPARATOR = '|'
DEFAULT_BASE_URL = 'https://threed.store'


class FeedWriter:
    """Base writer. Subclasses implement _write_products."""

    error_label = 'Feed'

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        # Only the Heureka feed prints absolute URLs
        self.base_url = base_url

    def write(self, sink: FileSink, products: Iterable[FeedProduct]) -> None:
        """
        Serialize products into sink.

        Raises:
            FeedWriteError: any failure while writing, wrapped with the writer's label
        """
        try:
            self._write_products(sink, products)
        except Exception as e:
            raise FeedWriteError(f"{self.error_label} Feed File creation error: {e}") from e

    def _write_products(self, sink: FileSink, products: Iterable[FeedProduct]) -> None:
        raise NotImplementedError


class CsvFeedWriter(FeedWriter):
    """One 'sku|name|price' line per product, no header."""

    error_label = 'CSV'

    def _write_products(self, sink: FileSink, products: Iterable[FeedProduct]) -> None:
        for product in products:
            sink.write(product.sku + FIELD_SEPARATOR)
            sink.write(product.name + FIELD_SEPARATOR)
            sink.write(format_decimal(product.price) + "\n")


class XmlFeedWriter(FeedWriter):
    """Generic <Products><Product> feed, no prolog."""

    error_label = 'XML'

    def _write_products(self, sink: FileSink, products: Iterable[FeedProduct]) -> None:
        sink.write("<Products>\n")

        for product in products:
            sink.write("<Product>\n")
            sink.write(f"<sku>{product.sku}</sku>\n")
            sink.write(f"<name>{product.name}</name>\n")
            sink.write(f"<price>{format_decimal(product.price)}</price>\n")
            sink.write("</Product>\n")

        sink.write("</Products>")


class HeurekaFeedWriter(FeedWriter):
    """
    Heureka price-comparison feed (<SHOP><SHOPITEM>).

    Products with a final price of zero are left out. PRICE_VAT is the final
    price with 20% VAT and HEUREKA_CPC the click bid, 2.5% of the final price
    capped at 1.
    """

    error_label = 'XML'

    VAT_MULTIPLIER = Decimal("1.2")
    CPC_RATE = Decimal("0.025")
    CPC_MAX = Decimal("1")
    COLOR_PARAM_NAME = 'Farba'

    @classmethod
    def click_price(cls, final_price: Decimal) -> Decimal:
        cpc = final_price * cls.CPC_RATE
        if cpc > cls.CPC_MAX:
            cpc = cls.CPC_MAX
        return cpc

    @staticmethod
    def description_text(raw: str) -> str:
        """Turn {{tag}} placeholders into markup, then strip all markup."""
        return strip_tags(raw.replace('}}', '>').replace('{{', '<'))

    def _write_products(self, sink: FileSink, products: Iterable[FeedProduct]) -> None:
        sink.write('<?xml version="1.0" encoding="utf-8"?>\n')
        sink.write("<SHOP>\n")

        for product in products:
            if product.final_price <= 0:
                logger.debug(f"Skipping {product.sku}: final price {product.final_price}")
                continue
            sink.write(self._render_item(product))

        sink.write("</SHOP>")

    def _render_item(self, product: FeedProduct) -> str:
        price = product.final_price

        # Exact empty-string check: a whitespace-only name is kept as is
        heureka_name = product.get_attribute('heureka_name')
        if heureka_name == "":
            heureka_name = product.name

        manufacturer = product.get_attribute('manufacturer')
        color = product.get_attribute('color')
        description = self.description_text(product.get_attribute('short_description'))

        lines = [
            "<SHOPITEM>",
            f" <ITEM_ID>{product.sku}</ITEM_ID>",
            f" <PRODUCTNAME>{heureka_name}</PRODUCTNAME>",
            f" <PRODUCT>{product.name}</PRODUCT>",
            f" <DESCRIPTION><![CDATA[{description}]]></DESCRIPTION>",
            f" <CATEGORYTEXT>{product.get_attribute('heureka_category')}</CATEGORYTEXT>",
            f" <PRICE_VAT>{format_decimal(price * self.VAT_MULTIPLIER)}</PRICE_VAT>",
            " <VAT>20%</VAT>",
            f" <URL>{self.base_url}{product.product_url}</URL>",
            f" <IMGURL>{self.base_url}{product.get_attribute('image')}</IMGURL>",
            f" <EAN>{product.get_attribute('ts_hs_code')}</EAN>",
            f" <HEUREKA_CPC>{format_decimal(self.click_price(price))}</HEUREKA_CPC>",
            " <DELIVERY_DATE>2</DELIVERY_DATE>",
            " <DELIVERY>",
            "  <DELIVERY_ID>DPD Classic</DELIVERY_ID>",
            "  <DELIVERY_PRICE>3.50</DELIVERY_PRICE>",
            "  <DELIVERY_PRICE_COD>4.30</DELIVERY_PRICE_COD>",
            " </DELIVERY>",
        ]

        if manufacturer != "":
            lines.append(f" <MANUFACTURER>{manufacturer}</MANUFACTURER>")
        if color != "":
            lines.extend([
                " <PARAM>",
                f"  <PARAM_NAME>{self.COLOR_PARAM_NAME}</PARAM_NAME>",
                f"  <VALUE>{color}</VALUE>",
                " </PARAM>",
            ])

        lines.append("</SHOPITEM>")
        return "\n".join(lines) + "\n"


_WRITERS: Dict[FeedFormat, Type[FeedWriter]] = {
    FeedFormat.CSV: CsvFeedWriter,
    FeedFormat.XML: XmlFeedWriter,
    FeedFormat.HEUREKA: HeurekaFeedWriter,
}


def get_writer(feed_format: FeedFormat, base_url: str = DEFAULT_BASE_URL) -> FeedWriter:
    """Writer for a format; anything unrecognized gets the CSV writer."""
    feed_format = FeedFormat.resolve(feed_format)
    return _WRITERS.get(feed_format, CsvFeedWriter)(base_url=base_url)
