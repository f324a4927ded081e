"""Assemble per-document text for the recommendation generator."""

from collections.abc import Iterable

from pydantic import BaseModel

from underwriting.core.config import get_config
from underwriting.core.documents import DocumentType
from underwriting.core.models import Chunk
from underwriting.utils.text import truncate_text


class DocumentSummary(BaseModel):
    """Text of one parsed document, trimmed to the prompt budget."""

    doc_type: DocumentType
    file_name: str
    text_content: str
    truncated: bool = False


def join_chunks(chunks: Iterable[Chunk]) -> str:
    """Concatenate chunk texts in index order, separated by blank lines."""
    return "\n\n".join(chunk.text for chunk in sorted(chunks, key=lambda c: c.index))


def build_document_summary(
    doc_type: DocumentType | str,
    file_name: str,
    chunks: Iterable[Chunk],
    max_chars: int | None = None,
) -> DocumentSummary:
    """
    Build the summary of a single document from its stored chunks.

    Args:
        doc_type: Document type of the record
        file_name: Original upload file name
        chunks: Chunks persisted for the document, in any order
        max_chars: Character budget per document (defaults to config)

    Returns:
        DocumentSummary whose text is cut to ``max_chars`` plus an ellipsis
    """
    if max_chars is None:
        max_chars = get_config().prompt_document_max_chars

    full = join_chunks(chunks)
    return DocumentSummary(
        doc_type=DocumentType(doc_type),
        file_name=file_name,
        text_content=truncate_text(full, max_chars),
        truncated=len(full) > max_chars,
    )
