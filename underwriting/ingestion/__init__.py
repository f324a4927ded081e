"""Document ingestion and processing."""

from .chunker import chunk_text, normalize_text
from .pdf_processor import PyMuPDFExtractor, TextExtractor
from .pipeline import IngestionPipeline, ingest
from .sources import load_pdf_bytes, process_pdf_file
from .validator import validate_pdf_bytes, validate_upload

__all__ = [
    "validate_pdf_bytes",
    "validate_upload",
    "TextExtractor",
    "PyMuPDFExtractor",
    "normalize_text",
    "chunk_text",
    "IngestionPipeline",
    "ingest",
    "load_pdf_bytes",
    "process_pdf_file",
]
