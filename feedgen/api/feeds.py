"""
Feed export API endpoints.
"""

import logging
from pathlib import Path
from fastapi import APIRouter, HTTPException, status, Depends, Query
from fastapi.responses import FileResponse, JSONResponse

from feedgen.config import Settings, get_settings
from feedgen.core.feed import ExportRequest, FeedExporter, FeedFormat, feed_product_from_dict
from feedgen.schemas.feed import FeedExportCreate, FeedExportResponse

router = APIRouter(prefix="/feeds", tags=["Feeds"])

logger = logging.getLogger(__name__)


def _resolve_feed_dir(root: Path, directory: str) -> Path:
    """
    Resolve directory under root.

    Raises:
        HTTPException: 400 if the directory points outside the application root
    """
    root = root.resolve()
    target = (root / directory).resolve()
    try:
        target.relative_to(root)
    except ValueError:
        logger.warning(f"Rejected feed directory outside root: {directory}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Directory must stay inside the application root"
        )
    return target


@router.post("/export", response_model=FeedExportResponse)
def export_feed(
    request: FeedExportCreate,
    settings: Settings = Depends(get_settings)
):
    """
    Write feed.<ext> for the posted products.

    Failures come back with status 500 and the exporter's message.
    """
    _resolve_feed_dir(settings.root_path, request.directory)

    feed_format = FeedFormat.resolve(request.format)
    export_request = ExportRequest(
        directory=request.directory,
        format=feed_format,
        products=[feed_product_from_dict(p.model_dump()) for p in request.products]
    )

    exporter = FeedExporter(root_path=settings.root_path, base_url=settings.feed_base_url)
    result = exporter.export(export_request)

    response = FeedExportResponse(
        success=result.success,
        message=result.message,
        path=result.path,
        filename=feed_format.filename if result.success else None
    )
    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump()
        )
    return response


@router.get("/download")
def download_feed(
    directory: str = Query(..., min_length=1),
    format: str = Query("csv"),
    settings: Settings = Depends(get_settings)
):
    """Download a previously exported feed file."""
    feed_format = FeedFormat.resolve(format)
    feed_file = _resolve_feed_dir(settings.root_path, directory) / feed_format.filename

    if not feed_file.is_file():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feed file {feed_format.filename} not found"
        )

    media_type = "text/csv" if feed_format == FeedFormat.CSV else "application/xml"
    return FileResponse(path=str(feed_file), filename=feed_format.filename, media_type=media_type)
