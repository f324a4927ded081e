"""PDF text extraction using PyMuPDF."""

from typing import Protocol

import fitz  # PyMuPDF
import structlog

from underwriting.core.errors import ExtractionFailedError
from underwriting.core.models import ExtractedText

logger = structlog.get_logger(__name__)


class TextExtractor(Protocol):
    """Anything that turns validated PDF bytes into text plus a page count."""

    def extract(self, data: bytes) -> ExtractedText: ...


def is_scanned_text(page_texts: list[str], threshold: int = 100, sample_pages: int = 3) -> bool:
    """
    Heuristic to detect if PDF is scanned (image-based).
    Returns True if the first pages carry very little text.
    """
    sample = page_texts[:sample_pages]
    if not sample:
        return True

    text_chars = sum(len(text.strip()) for text in sample)
    return text_chars / len(sample) < threshold


class PyMuPDFExtractor:
    """Extract text from PDF bytes with PyMuPDF.

    Failures are strict: any error opening or reading the document raises
    ``ExtractionFailedError``. There is no placeholder fallback.
    """

    def __init__(self, scanned_threshold: int = 100, scanned_sample_pages: int = 3):
        self.scanned_threshold = scanned_threshold
        self.scanned_sample_pages = scanned_sample_pages

    def extract(self, data: bytes) -> ExtractedText:
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            logger.error("pdf_open_failed", error=str(e))
            raise ExtractionFailedError(f"Failed to open PDF: {e}", cause=e) from e

        try:
            if doc.needs_pass:
                raise ExtractionFailedError("PDF is password-protected")
            if doc.page_count == 0:
                raise ExtractionFailedError("PDF has no readable pages")

            page_texts = [page.get_text() for page in doc]
            page_count = doc.page_count
        except ExtractionFailedError:
            logger.error("pdf_extraction_failed", error="unreadable")
            raise
        except Exception as e:
            logger.error("pdf_extraction_failed", error=str(e))
            raise ExtractionFailedError(f"Failed to extract PDF text: {e}", cause=e) from e
        finally:
            doc.close()

        if is_scanned_text(page_texts, self.scanned_threshold, self.scanned_sample_pages):
            logger.warning("pdf_possibly_scanned", pages=page_count)

        extracted = ExtractedText.from_segments(page_texts, page_count)
        logger.info(
            "pdf_extracted",
            pages=extracted.page_count,
            chars=len(extracted.full_text),
        )
        return extracted
