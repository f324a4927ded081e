"""Load raw document bytes from local paths or storage URLs."""

import asyncio
from pathlib import Path

import httpx
import structlog

from underwriting.core.config import get_config
from underwriting.core.errors import DocumentFetchError
from underwriting.core.models import IngestionResult
from underwriting.ingestion.pipeline import IngestionPipeline

logger = structlog.get_logger(__name__)


def is_remote(location: str | Path) -> bool:
    """True when the location is an http(s) URL rather than a file path."""
    return isinstance(location, str) and location.startswith(("http://", "https://"))


async def load_pdf_bytes(
    location: str | Path,
    client: httpx.AsyncClient | None = None,
) -> bytes:
    """
    Read a stored document.

    Args:
        location: Local file path or http(s) URL of object storage
        client: Optional HTTP client (a short-lived one is created otherwise)

    Returns:
        Raw bytes of the document

    Raises:
        DocumentFetchError: If the file is missing or the download fails
    """
    if not is_remote(location):
        path = Path(location)
        logger.info("reading_pdf", path=str(path))
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise DocumentFetchError(f"Failed to read PDF from {path}: {e}") from e

    logger.info("fetching_pdf", url=location)
    config = get_config()

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.fetch_timeout) as owned:
                response = await owned.get(location, follow_redirects=True)
        else:
            response = await client.get(location, follow_redirects=True)
    except httpx.HTTPError as e:
        raise DocumentFetchError(f"Failed to fetch PDF from storage: {e}") from e

    if not response.is_success:
        raise DocumentFetchError(
            f"Failed to fetch PDF from storage: {response.status_code} {response.reason_phrase}"
        )

    logger.info("fetched_pdf", url=location, size_bytes=len(response.content))
    return response.content


async def process_pdf_file(
    location: str | Path,
    pipeline: IngestionPipeline | None = None,
    client: httpx.AsyncClient | None = None,
) -> IngestionResult:
    """
    Load a stored PDF and run the ingestion pipeline on it.

    Extraction is blocking, so it runs in a worker thread. Any timeout or
    retry policy belongs to the caller.
    """
    pipeline = pipeline or IngestionPipeline()
    data = await load_pdf_bytes(location, client=client)
    return await asyncio.to_thread(pipeline.ingest, data)
