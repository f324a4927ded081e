"""Core configuration, data models and errors."""

from .config import Config, get_config
from .documents import (
    DOCUMENT_TYPES,
    DocumentType,
    DocumentTypeInfo,
    missing_document_types,
    required_document_types,
)
from .errors import (
    DocumentFetchError,
    EmptyInputError,
    ExtractionFailedError,
    FileTooLargeError,
    IngestionError,
    InvalidFormatError,
)
from .models import Chunk, ExtractedText, IngestionResult

__all__ = [
    "get_config",
    "Config",
    "DocumentType",
    "DocumentTypeInfo",
    "DOCUMENT_TYPES",
    "required_document_types",
    "missing_document_types",
    "IngestionError",
    "EmptyInputError",
    "InvalidFormatError",
    "FileTooLargeError",
    "ExtractionFailedError",
    "DocumentFetchError",
    "ExtractedText",
    "Chunk",
    "IngestionResult",
]
