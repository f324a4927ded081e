"""Document ingestion pipeline: validate, extract, normalize, chunk."""

import structlog

from underwriting.core.config import get_config
from underwriting.core.models import IngestionResult
from underwriting.ingestion.chunker import chunk_text, normalize_text
from underwriting.ingestion.pdf_processor import PyMuPDFExtractor, TextExtractor
from underwriting.ingestion.validator import validate_pdf_bytes

logger = structlog.get_logger(__name__)


class IngestionPipeline:
    """Turns raw PDF bytes into an ordered sequence of page-annotated chunks.

    Holds only configuration; each ``ingest`` call is independent, so one
    pipeline can be shared across concurrent callers.
    """

    def __init__(
        self,
        extractor: TextExtractor | None = None,
        max_chunk_size: int | None = None,
    ):
        config = get_config()
        self.extractor = extractor or PyMuPDFExtractor(
            scanned_threshold=config.scanned_chars_per_page_threshold,
            scanned_sample_pages=config.scanned_sample_pages,
        )
        if max_chunk_size is None:
            max_chunk_size = config.max_chunk_size
        if max_chunk_size < 1:
            raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")
        self.max_chunk_size = max_chunk_size

    def ingest(self, data: bytes) -> IngestionResult:
        """
        Run the full pipeline on one document.

        Raises:
            EmptyInputError: If ``data`` is empty
            InvalidFormatError: If ``data`` lacks the PDF header
            ExtractionFailedError: If the extractor cannot parse the document
        """
        validate_pdf_bytes(data)
        log = logger.bind(size_bytes=len(data))

        extracted = self.extractor.extract(data)
        normalized = normalize_text(extracted.full_text)
        chunks = chunk_text(normalized, extracted.page_count, self.max_chunk_size)

        log.info(
            "document_ingested",
            pages=extracted.page_count,
            chunks=len(chunks),
            text_length=len(extracted.full_text),
        )

        return IngestionResult(
            full_text=extracted.full_text,
            page_count=extracted.page_count,
            chunks=chunks,
        )


def ingest(
    data: bytes,
    extractor: TextExtractor | None = None,
    max_chunk_size: int | None = None,
) -> IngestionResult:
    """Ingest raw PDF bytes with a one-off pipeline."""
    return IngestionPipeline(extractor=extractor, max_chunk_size=max_chunk_size).ingest(data)
