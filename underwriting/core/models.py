"""Data models for document ingestion."""

from pydantic import BaseModel, ConfigDict, Field


class ExtractedText(BaseModel):
    """Plain text and page count produced once per PDF."""

    model_config = ConfigDict(frozen=True)

    full_text: str
    page_count: int = Field(ge=1)

    @classmethod
    def from_segments(
        cls, text: str | list[str], page_count: int | None = None
    ) -> "ExtractedText":
        """Build from an extractor's raw output.

        Per-page segments are joined in page order with a blank line. A
        missing, zero or negative page count falls back to 1.
        """
        if isinstance(text, list):
            text = "\n\n".join(text)
        if not page_count or page_count < 1:
            page_count = 1
        return cls(full_text=text or "", page_count=page_count)


class Chunk(BaseModel):
    """A bounded-size slice of a document's text with an estimated page."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    text: str = Field(min_length=1)
    page_hint: int | None = Field(default=None, ge=1)


class IngestionResult(BaseModel):
    """Output of one ingestion call, handed to the caller for persistence."""

    full_text: str
    page_count: int = Field(ge=1)
    chunks: list[Chunk] = Field(min_length=1)
