"""Boundary types shared with the recommendation generator."""

from .context import DocumentSummary, build_document_summary, join_chunks
from .schema import AnalysisOutput, AnalysisParseError, Recommendation, parse_analysis_output

__all__ = [
    "DocumentSummary",
    "build_document_summary",
    "join_chunks",
    "AnalysisOutput",
    "AnalysisParseError",
    "Recommendation",
    "parse_analysis_output",
]
