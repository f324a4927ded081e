"""Deal document ingestion for loan underwriting."""

__version__ = "0.1.0"
