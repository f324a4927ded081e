"""Shared fixtures: PDFs built in memory with PyMuPDF."""

import fitz  # PyMuPDF
import pytest


def make_pdf(pages: list[str], **save_options) -> bytes:
    """Create a PDF with one page per entry (empty string = blank page)."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes(**save_options)
    doc.close()
    return data


@pytest.fixture
def simple_pdf() -> bytes:
    return make_pdf(["Test Document: Simple PDF\nThis is a test PDF document for the ingestion pipeline."])


@pytest.fixture
def multipage_pdf() -> bytes:
    return make_pdf(
        [
            "Alpha page content",
            "Bravo page content",
            "Charlie page content",
        ]
    )


@pytest.fixture
def blank_pdf() -> bytes:
    """PDF with a single blank page (simulates a scanned document)."""
    return make_pdf([""])


@pytest.fixture
def encrypted_pdf() -> bytes:
    return make_pdf(
        ["Confidential bank statement"],
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner-secret",
        user_pw="user-secret",
    )
