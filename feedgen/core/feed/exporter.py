"""
Feed export service - opens the feed file, runs the matching writer, reports the result.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .errors import FeedExportError
from .file_sink import FileSink
from .models import FEED_FILE_NAME, ExportRequest, ExportResult, FeedFormat, FeedProduct
from .writers import DEFAULT_BASE_URL, get_writer


logger = logging.getLogger(__name__)


class FeedExporter:
    """
    Writes product feeds under an application root.

    Every call creates or overwrites <root>/<directory>/feed.<ext>. No state
    is kept between calls.
    """

    def __init__(
        self,
        root_path: Optional[Union[str, Path]] = None,
        base_url: str = DEFAULT_BASE_URL
    ):
        self.root_path = Path(root_path) if root_path is not None else Path(os.getcwd())
        self.base_url = base_url

    def export(self, request: ExportRequest) -> ExportResult:
        """
        Run one export.

        Args:
            request: ExportRequest with destination directory, format and products

        Returns:
            ExportResult. Never raises: directory, open and write failures
            all come back as ExportResult.failure(message).
        """
        target = request.directory
        try:
            feed_format = FeedFormat.resolve(request.format)
            sink = FileSink(self.root_path, request.directory, FEED_FILE_NAME, feed_format.extension)
            target = sink.path
            products = list(request.products)

            logger.info(f"Exporting {len(products)} products as {feed_format.value} to {sink.path}")

            with sink:
                get_writer(feed_format, base_url=self.base_url).write(sink, products)
        except FeedExportError as e:
            logger.error(f"Feed export to {target} failed: {e}")
            return ExportResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Feed export to {target} failed unexpectedly")
            return ExportResult.failure(f"Unexpected error: {e}")

        logger.info(f"Feed file written: {sink.path}")
        return ExportResult.ok(path=str(sink.path))


def write_feed_file(
    directory: str,
    feed_format: Union[FeedFormat, str],
    products: Iterable[FeedProduct],
    root_path: Optional[Union[str, Path]] = None,
    base_url: str = DEFAULT_BASE_URL
) -> ExportResult:
    """
    Write <root>/<directory>/feed.<ext> for the given products.

    Unknown format tokens are written as CSV.
    """
    request = ExportRequest(directory=directory, format=feed_format, products=list(products))
    return FeedExporter(root_path=root_path, base_url=base_url).export(request)
