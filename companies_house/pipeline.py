"""
Caller-facing lookup entry point.

Flow:
  ┌──────────┐
  │ Raw CRN  │
  └────┬─────┘
       │
  ┌────▼─────┐
  │ Validate │   ← InvalidCRNFormat, registry never called
  └────┬─────┘
       │
  ┌────▼─────┐
  │  Lookup  │   ← UpstreamError propagates as-is
  └────┬─────┘
       │
  ┌────▼─────┐
  │ Records  │
  └──────────┘
"""

from __future__ import annotations

import logging

from .models import CompanyRecord
from .service import CompaniesHouseService
from .validators import validate_crn

logger = logging.getLogger(__name__)


class CompanyLookupPipeline:
    """Validates a CRN, then fetches its company records.

    Usage:
        pipeline = CompanyLookupPipeline(CompaniesHouseService(client))
        records = pipeline.get_company_records("AB123456")
    """

    def __init__(self, service: CompaniesHouseService):
        self.service = service

    def get_company_records(self, crn: str) -> list[CompanyRecord]:
        """Return the registry records for ``crn``.

        Raises:
            InvalidCRNFormat: the CRN is malformed.
            UpstreamError: the registry lookup failed.
        """
        validated = validate_crn(crn)
        logger.info("Looking up company records for CRN %s", validated)
        return self.service.get_company_records(validated)
