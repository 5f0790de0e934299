"""
Companies House Lookup — FastAPI Server
========================================

RESTful API for looking companies up by Company Registration Number (CRN).

Endpoints:
    GET /companies/{crn}    Records matching a CRN
    GET /health             Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Config (environment or .env):
    COMPANIES_HOUSE_API_KEY     Registry API key (required upstream)
    COMPANIES_HOUSE_BASE_URL    Override the registry base URL
    COMPANIES_HOUSE_TIMEOUT     Upstream timeout in seconds (default 10)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from companies_house import __version__
from companies_house.client import CompaniesHouseClient
from companies_house.config import Settings
from companies_house.exceptions import CompanyLookupError
from companies_house.models import CompanyRecord
from companies_house.pipeline import CompanyLookupPipeline
from companies_house.service import CompaniesHouseService

load_dotenv()


# ─── Application Lifespan (shared HTTP client) ──────────────────────

_pipeline: CompanyLookupPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one registry client for the process and close it on shutdown."""
    global _pipeline  # noqa: PLW0603
    client = CompaniesHouseClient(Settings())
    _pipeline = CompanyLookupPipeline(CompaniesHouseService(client))
    try:
        yield
    finally:
        _pipeline = None
        client.close()


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Companies House Lookup API",
    description=(
        "Validates a Company Registration Number and returns the matching "
        "company records from the Companies House registry."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> CompanyLookupPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Lookup service not initialised")
    return _pipeline


# ─── Endpoints ───────────────────────────────────────────────────────


@app.get(
    # path converter: empty and slash-containing CRNs must reach the validator, not 404
    "/companies/{crn:path}",
    summary="Look up company records by CRN",
    tags=["Companies"],
    response_model_exclude_none=True,
    responses={
        400: {"description": "CRN should only contain alphanumeric characters"},
        502: {"description": "Companies House lookup failed"},
        503: {"description": "Lookup service not yet initialised"},
    },
)
def get_company_records(crn: str) -> list[CompanyRecord]:
    """Return every registry record matching `crn`, in registry order.

    - A CRN with anything other than letters and digits is rejected with
      **400** and the registry is not contacted.
    - An empty list means the registry found no match.
    - Registry failures (unreachable, bad status, malformed body) give **502**.
    """
    pipeline = _get_pipeline()
    try:
        return pipeline.get_company_records(crn)
    except CompanyLookupError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Lookup service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _get_pipeline()
    return HealthResponse(status="healthy", version=__version__)
