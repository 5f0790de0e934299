"""
FastAPI endpoint tests for the Companies House Lookup API.

A stub registry is installed behind the pipeline, so the TestClient never reaches Companies House.
"""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import patch
from urllib.parse import quote

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from companies_house import __version__
from companies_house.exceptions import UpstreamStatusError, UpstreamTransportError
from companies_house.pipeline import CompanyLookupPipeline
from companies_house.service import CompaniesHouseService
from companies_house.validators import CRN_FORMAT_MESSAGE

client = TestClient(app)


# ─── Sample data ────────────────────────────────────────────────────

TEST_CRN = "AB123456"
BAD_CRN = "msf@£@$SDFSDFSDF12313"

COMPANY_ITEMS: list[dict[str, Any]] = [
    {
        "company_number": "AB123456",
        "title": "EXAMPLE TRADING LIMITED",
        "company_status": "active",
        "address": {"locality": "London", "postal_code": "EC1A 1AA"},
    },
    {
        "company_number": "AB123457",
        "title": "AARDVARK HOLDINGS PLC",
        "company_status": "dissolved",
        "sic_codes": ["64209"],  # passes through untouched
    },
]


class StubRegistryClient:
    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[str] = []

    def query_by_crn(self, crn: str) -> dict[str, Any]:
        self.calls.append(crn)
        if self.error is not None:
            raise self.error
        return self.payload or {}


def _install(stub: StubRegistryClient) -> StubRegistryClient:
    api._pipeline = CompanyLookupPipeline(CompaniesHouseService(stub))
    return stub


@pytest.fixture(autouse=True)
def _reset_pipeline() -> None:
    """Each test installs its own stub registry (bypasses lifespan)."""
    yield  # type: ignore[misc]
    api._pipeline = None


class TestCompaniesEndpoint:
    def test_returns_records_for_valid_crn(self) -> None:
        stub = _install(StubRegistryClient({"items": COMPANY_ITEMS}))

        resp = client.get(f"/companies/{TEST_CRN}")

        assert resp.status_code == 200
        assert resp.json() == COMPANY_ITEMS
        assert stub.calls == [TEST_CRN]

    def test_no_matches_returns_empty_list(self) -> None:
        _install(StubRegistryClient({"items": [], "total_results": 0}))
        resp = client.get(f"/companies/{TEST_CRN}")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_special_characters_return_400(self) -> None:
        stub = _install(StubRegistryClient({"items": COMPANY_ITEMS}))

        resp = client.get(f"/companies/{quote(BAD_CRN)}")

        assert resp.status_code == 400
        assert resp.json() == {"detail": CRN_FORMAT_MESSAGE}
        assert stub.calls == []

    def test_whitespace_returns_400(self) -> None:
        stub = _install(StubRegistryClient({"items": COMPANY_ITEMS}))
        resp = client.get(f"/companies/{quote('AB 123456')}")
        assert resp.status_code == 400
        assert stub.calls == []

    @pytest.mark.parametrize("crn", ["", "AB/123"])
    def test_empty_or_slashed_crn_returns_400(self, crn: str) -> None:
        stub = _install(StubRegistryClient({"items": COMPANY_ITEMS}))

        resp = client.get("/companies/" + quote(crn, safe=""))

        assert resp.status_code == 400
        assert resp.json() == {"detail": CRN_FORMAT_MESSAGE}
        assert stub.calls == []

    def test_transport_failure_returns_502(self) -> None:
        _install(StubRegistryClient(error=UpstreamTransportError("connection refused")))
        resp = client.get(f"/companies/{TEST_CRN}")
        assert resp.status_code == 502
        assert resp.json() == {"detail": "connection refused"}

    def test_upstream_status_returns_502(self) -> None:
        _install(StubRegistryClient(error=UpstreamStatusError(500, "Companies House returned HTTP 500")))
        resp = client.get(f"/companies/{TEST_CRN}")
        assert resp.status_code == 502

    def test_malformed_payload_returns_502(self) -> None:
        _install(StubRegistryClient({"unexpected": True}))
        resp = client.get(f"/companies/{TEST_CRN}")
        assert resp.status_code == 502

    def test_uninitialised_service_returns_503(self) -> None:
        resp = client.get(f"/companies/{TEST_CRN}")
        assert resp.status_code == 503


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        _install(StubRegistryClient())
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "version": __version__}

    def test_health_before_startup_returns_503(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 503

    def test_lifespan_initialises_and_tears_down(self) -> None:
        with TestClient(app) as lifespan_client:
            assert lifespan_client.get("/health").status_code == 200
        assert api._pipeline is None

    def test_lifespan_closes_client_when_interrupted(self) -> None:
        async def _interrupted_run() -> None:
            async with api.lifespan(app):
                raise RuntimeError("interrupted")

        with patch("api.CompaniesHouseClient.close") as close:
            with pytest.raises(RuntimeError, match="interrupted"):
                asyncio.run(_interrupted_run())

        close.assert_called_once()
        assert api._pipeline is None
