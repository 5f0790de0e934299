"""
Lookup service: one registry query, mapped into CompanyRecord values.

The service trusts its caller to have validated the CRN already; format
checking belongs to ``validators.validate_crn``.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .client import RegistryClient
from .exceptions import UpstreamPayloadError
from .models import CompanyRecord, CompanySearchResponse

logger = logging.getLogger(__name__)


class CompaniesHouseService:
    """Maps registry search results into an ordered list of company records."""

    def __init__(self, client: RegistryClient):
        self.client = client

    def get_company_records(self, crn: str) -> list[CompanyRecord]:
        """Look ``crn`` up upstream and return the matches in upstream order.

        An empty list means the registry found nothing. Any UpstreamError
        raised by the client propagates unchanged.

        Raises:
            UpstreamPayloadError: if the response body does not match the
                expected search-result shape.
        """
        payload = self.client.query_by_crn(crn)

        try:
            response = CompanySearchResponse.model_validate(payload)
        except ValidationError as e:
            logger.error("Malformed Companies House payload for CRN %s: %s", crn, e)
            raise UpstreamPayloadError(
                "Companies House response did not match the expected schema",
                details={"crn": crn, "errors": e.errors(include_url=False)},
            ) from e

        records = list(response.items)
        logger.info("Companies House returned %d record(s) for CRN %s", len(records), crn)
        return records
