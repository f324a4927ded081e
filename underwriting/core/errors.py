"""Ingestion error taxonomy."""


class IngestionError(Exception):
    """Base class for document ingestion failures."""


class EmptyInputError(IngestionError):
    """Raised when a zero-length byte sequence is given for ingestion."""

    def __init__(self, message: str = "Document is empty (0 bytes)"):
        super().__init__(message)


class InvalidFormatError(IngestionError):
    """Raised when the input does not look like a PDF."""


class FileTooLargeError(IngestionError):
    """Raised when an upload exceeds the configured size limit."""


class ExtractionFailedError(IngestionError):
    """Raised when the text extractor cannot parse the document.

    The underlying exception is kept on ``cause`` (and chained as
    ``__cause__``) so callers can record it on the document record.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class DocumentFetchError(IngestionError):
    """Raised when raw document bytes cannot be loaded from their location."""
