"""Deal document types and completeness checks."""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel


class DocumentType(str, Enum):
    """Supporting document types that can be attached to a deal."""

    BORROWER_INTAKE_SUMMARY = "BORROWER_INTAKE_SUMMARY"
    PERSONAL_FINANCIAL_STATEMENT = "PERSONAL_FINANCIAL_STATEMENT"
    BUSINESS_FINANCIAL_STATEMENTS = "BUSINESS_FINANCIAL_STATEMENTS"
    BUSINESS_TAX_RETURNS = "BUSINESS_TAX_RETURNS"
    PERSONAL_TAX_RETURNS = "PERSONAL_TAX_RETURNS"
    BUSINESS_DEBT_SCHEDULE = "BUSINESS_DEBT_SCHEDULE"
    AR_AP_AGING = "AR_AP_AGING"
    BANK_STATEMENTS = "BANK_STATEMENTS"
    BUSINESS_PLAN_EXEC_SUMMARY = "BUSINESS_PLAN_EXEC_SUMMARY"
    COLLATERAL_UCC_INSURANCE = "COLLATERAL_UCC_INSURANCE"
    ENTITY_LEGAL_DOCS = "ENTITY_LEGAL_DOCS"
    PROJECT_COSTS_QUOTES = "PROJECT_COSTS_QUOTES"
    OTHER = "OTHER"


class DocumentTypeInfo(BaseModel):
    """Display metadata for a document type."""

    type: DocumentType
    label: str
    description: str
    required: bool = False


DOCUMENT_TYPES: tuple[DocumentTypeInfo, ...] = (
    DocumentTypeInfo(
        type=DocumentType.BORROWER_INTAKE_SUMMARY,
        label="Borrower Intake Summary",
        description="Application intake form with borrower details",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.PERSONAL_FINANCIAL_STATEMENT,
        label="Personal Financial Statement",
        description="SBA Form 413 or equivalent",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.BUSINESS_FINANCIAL_STATEMENTS,
        label="Business Financial Statements",
        description="P&L, Balance Sheet, Cash Flow (3 years)",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.BUSINESS_TAX_RETURNS,
        label="Business Tax Returns",
        description="Last 3 years of business tax returns",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.PERSONAL_TAX_RETURNS,
        label="Personal Tax Returns",
        description="Last 3 years of personal tax returns for principals",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.BUSINESS_DEBT_SCHEDULE,
        label="Business Debt Schedule",
        description="Current debt obligations and payment schedule",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.AR_AP_AGING,
        label="AR/AP Aging Reports",
        description="Accounts receivable and payable aging",
    ),
    DocumentTypeInfo(
        type=DocumentType.BANK_STATEMENTS,
        label="Bank Statements",
        description="Last 6-12 months of business bank statements",
        required=True,
    ),
    DocumentTypeInfo(
        type=DocumentType.BUSINESS_PLAN_EXEC_SUMMARY,
        label="Business Plan / Executive Summary",
        description="Business overview and projections",
    ),
    DocumentTypeInfo(
        type=DocumentType.COLLATERAL_UCC_INSURANCE,
        label="Collateral / UCC / Insurance",
        description="Collateral documentation, UCC filings, insurance policies",
    ),
    DocumentTypeInfo(
        type=DocumentType.ENTITY_LEGAL_DOCS,
        label="Entity & Legal Documents",
        description="Articles of incorporation, operating agreements, etc.",
    ),
    DocumentTypeInfo(
        type=DocumentType.PROJECT_COSTS_QUOTES,
        label="Project Costs & Quotes",
        description="Use of funds breakdown, contractor quotes",
    ),
)


def get_document_type_info(
    doc_type: DocumentType | str,
    registry: Iterable[DocumentTypeInfo] = DOCUMENT_TYPES,
) -> DocumentTypeInfo | None:
    """Look up registry metadata for a document type."""
    doc_type = DocumentType(doc_type)
    for info in registry:
        if info.type == doc_type:
            return info
    return None


def required_document_types(
    registry: Iterable[DocumentTypeInfo] = DOCUMENT_TYPES,
) -> list[DocumentType]:
    """Document types a deal must have before analysis, in registry order."""
    return [info.type for info in registry if info.required]


def missing_document_types(
    present: Iterable[DocumentType | str],
    required: Iterable[DocumentType] | None = None,
) -> list[DocumentType]:
    """
    Return the required document types that are not present.

    Args:
        present: Document types already uploaded for the deal
        required: Required types to check against (defaults to the registry's)

    Returns:
        Missing types in the order of ``required``
    """
    present_types = {DocumentType(t) for t in present}
    if required is None:
        required = required_document_types()
    return [t for t in required if t not in present_types]
