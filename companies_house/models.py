"""
Pydantic models for Companies House search data.

Records are frozen: they are built once from the upstream payload and never
mutated. The registry adds fields over time, so unknown keys are kept as-is
(``extra="allow"``) instead of failing the lookup. Required fields are still
required: an item without a company number is a broken payload, not a company.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


# ─── Company Record ─────────────────────────────────────────────────


class RegisteredAddress(BaseModel):
    """Registered office address as returned in a search item."""

    model_config = {"frozen": True, "extra": "allow"}

    premises: Optional[str] = None
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class CompanyRecord(BaseModel):
    """One company matched by the registry."""

    model_config = {
        "frozen": True,
        "extra": "allow",
        "json_schema_extra": {"example": {
            "company_number": "AB123456",
            "title": "EXAMPLE TRADING LIMITED",
            "company_status": "active",
            "company_type": "ltd",
            "date_of_creation": "2015-03-02",
            "address_snippet": "1 High Street, London, EC1A 1AA",
            "kind": "searchresults#company",
        }},
    }

    company_number: str
    title: str
    company_status: Optional[str] = None
    company_type: Optional[str] = None
    date_of_creation: Optional[str] = None  # ISO date string, kept verbatim
    date_of_cessation: Optional[str] = None
    address_snippet: Optional[str] = None
    address: Optional[RegisteredAddress] = None
    description: Optional[str] = None
    kind: Optional[str] = None
    links: Optional[dict[str, str]] = None


# ─── Upstream Envelope ──────────────────────────────────────────────


class CompanySearchResponse(BaseModel):
    """The `/search/companies` response body.

    ``items`` is required on purpose: a body without it is malformed, and
    must not be mistaken for "no matches".
    """

    model_config = {"frozen": True, "extra": "allow"}

    items: list[CompanyRecord]
    total_results: Optional[int] = None
    items_per_page: Optional[int] = None
    start_index: Optional[int] = None
    kind: Optional[str] = None
