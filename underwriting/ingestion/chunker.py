"""Text chunking utilities (paragraph-based greedy packing)."""

import math
import re

import structlog

from underwriting.core.models import Chunk

logger = structlog.get_logger(__name__)

DEFAULT_MAX_CHUNK_SIZE = 4000
EMPTY_TEXT_PLACEHOLDER = "[No text content extracted]"
PARAGRAPH_SEPARATOR = "\n\n"


def normalize_text(text: str) -> str:
    """
    Canonicalize whitespace so paragraph splitting is deterministic.

    - Converts CRLF line endings to LF
    - Caps runs of blank lines at one blank line (3+ newlines -> 2)
    - Trims leading/trailing whitespace
    """
    if not text:
        return ""

    while "\r\n" in text:
        text = text.replace("\r\n", "\n")
    text = re.sub(r"\n{3,}", PARAGRAPH_SEPARATOR, text)

    return text.strip()


def split_into_paragraphs(text: str) -> list[str]:
    """Split normalized text into paragraphs on blank lines."""
    if not text:
        return []
    parts = re.split(r"\n{2,}", text)
    return [p.strip() for p in parts if p.strip()]


def estimate_page_hint(chunk_index: int, emitted: int, page_count: int) -> int:
    """
    Estimate the source page of a closed chunk from its position in the output.

    Linear interpolation of output position over page count, clamped to
    ``[1, page_count]``. This is not an exact page mapping: merged-page
    extraction does not keep per-character page boundaries.
    """
    page_count = max(page_count, 1)
    estimate = math.ceil((chunk_index + 1) * (page_count / max(emitted + 1, 1)))
    return max(1, min(estimate, page_count))


def chunk_text(
    text: str,
    page_count: int = 1,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
) -> list[Chunk]:
    """
    Pack paragraphs greedily into chunks of at most ``max_chunk_size`` characters.

    Chunks only break at paragraph boundaries. A paragraph that is longer than
    ``max_chunk_size`` on its own is kept whole in its own chunk.

    Args:
        text: Normalized text (see ``normalize_text``)
        page_count: Number of pages in the source document
        max_chunk_size: Soft character limit per chunk

    Returns:
        Chunks with contiguous 0-based indices; never empty
    """
    if max_chunk_size < 1:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")

    page_count = max(page_count, 1)

    if not text:
        return [Chunk(index=0, text=EMPTY_TEXT_PLACEHOLDER, page_hint=1)]

    chunks: list[Chunk] = []
    current = ""
    chunk_index = 0

    for paragraph in split_into_paragraphs(text):
        # Close the buffer if this paragraph would push it past the limit
        if current and len(current) + len(paragraph) + 2 > max_chunk_size:
            chunks.append(
                Chunk(
                    index=chunk_index,
                    text=current.strip(),
                    page_hint=estimate_page_hint(chunk_index, len(chunks), page_count),
                )
            )
            chunk_index += 1
            current = ""

        current = f"{current}{PARAGRAPH_SEPARATOR}{paragraph}" if current else paragraph

    if current:
        chunks.append(Chunk(index=chunk_index, text=current.strip(), page_hint=page_count))

    if not chunks:
        fallback = text[:max_chunk_size].strip() or EMPTY_TEXT_PLACEHOLDER
        chunks.append(Chunk(index=0, text=fallback, page_hint=1))

    logger.debug(
        "chunking_complete",
        chunks=len(chunks),
        page_count=page_count,
        max_chunk_size=max_chunk_size,
    )

    return chunks
