"""
Upstream registry client: the only code that talks to Companies House.

The lookup service depends on the ``RegistryClient`` protocol, not on this
module's httpx implementation, so tests can hand it any object with a
``query_by_crn`` method.

Error mapping:
  - httpx transport failure   → UpstreamTransportError
  - non-2xx HTTP status       → UpstreamStatusError
  - body not a JSON object    → UpstreamPayloadError

No retries. Timeouts come from Settings.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from .config import Settings
from .exceptions import UpstreamPayloadError, UpstreamStatusError, UpstreamTransportError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/companies"


class RegistryClient(Protocol):
    """Anything that can look a CRN up in the registry."""

    def query_by_crn(self, crn: str) -> dict[str, Any]:
        """Return the raw registry response body for ``crn``."""
        ...


class CompaniesHouseClient:
    """httpx-backed client for the Companies House public data API.

    Usage:
        with CompaniesHouseClient(Settings()) as client:
            payload = client.query_by_crn("AB123456")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or Settings()
        # Companies House uses the API key as the basic-auth username, no password
        self._http = httpx.Client(
            base_url=self.settings.base_url,
            auth=(self.settings.api_key, ""),
            timeout=httpx.Timeout(self.settings.timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def query_by_crn(self, crn: str) -> dict[str, Any]:
        """Search the registry for ``crn`` and return the decoded JSON body."""
        logger.info("Querying Companies House for CRN %s", crn)

        try:
            response = self._http.get(SEARCH_PATH, params={"q": crn})
        except httpx.HTTPError as e:
            logger.error("Companies House request failed: %s", e)
            raise UpstreamTransportError(
                f"Companies House request failed: {e}",
                details={"crn": crn, "error": type(e).__name__},
            ) from e

        if not response.is_success:
            logger.error(
                "Companies House returned HTTP %s for CRN %s", response.status_code, crn
            )
            raise UpstreamStatusError(
                response.status_code,
                f"Companies House returned HTTP {response.status_code}",
                details={"crn": crn},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamPayloadError(
                "Companies House returned a non-JSON body",
                details={"crn": crn},
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamPayloadError(
                f"Companies House returned a JSON {type(payload).__name__}, expected an object",
                details={"crn": crn},
            )

        return payload

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> CompaniesHouseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
