"""Input validation for raw PDF uploads."""

from underwriting.core.config import get_config
from underwriting.core.errors import EmptyInputError, FileTooLargeError, InvalidFormatError

PDF_MAGIC = b"%PDF"
ALLOWED_CONTENT_TYPES = ("application/pdf",)


def validate_pdf_bytes(data: bytes) -> bytes:
    """
    Fail fast on input that cannot be a PDF.

    The check is advisory: bytes with a valid header may still be
    unparseable, which surfaces later as an extraction failure.

    Returns:
        ``data`` unchanged

    Raises:
        EmptyInputError: If ``data`` is zero-length
        InvalidFormatError: If ``data`` does not start with ``%PDF``
    """
    if not data:
        raise EmptyInputError()

    if not data.startswith(PDF_MAGIC):
        raise InvalidFormatError("File is not a PDF (missing %PDF header)")

    return data


def validate_upload(
    content_type: str | None,
    size: int | None,
    max_file_size: int | None = None,
) -> None:
    """Check an upload's declared content type and size before storing it."""
    if max_file_size is None:
        max_file_size = get_config().max_file_size

    if not content_type or content_type not in ALLOWED_CONTENT_TYPES:
        raise InvalidFormatError("Only PDF files are allowed")

    if size and size > max_file_size:
        limit_mb = max_file_size / 1024 / 1024
        raise FileTooLargeError(f"File size exceeds maximum allowed ({limit_mb:g}MB)")
