"""
Feed export core module.
"""

from .models import FeedFormat, FeedProduct, ExportRequest, ExportResult
from .errors import FeedExportError, DirectoryCreationError, FileOpenError, FeedWriteError
from .file_sink import FileSink
from .writers import FeedWriter, CsvFeedWriter, XmlFeedWriter, HeurekaFeedWriter, get_writer
from .exporter import FeedExporter, write_feed_file
from .adapters import feed_product_from_dict, feed_products_from_dicts

__all__ = [
    'FeedFormat',
    'FeedProduct',
    'ExportRequest',
    'ExportResult',
    'FeedExportError',
    'DirectoryCreationError',
    'FileOpenError',
    'FeedWriteError',
    'FileSink',
    'FeedWriter',
    'CsvFeedWriter',
    'XmlFeedWriter',
    'HeurekaFeedWriter',
    'get_writer',
    'FeedExporter',
    'write_feed_file',
    'feed_product_from_dict',
    'feed_products_from_dicts',
]
