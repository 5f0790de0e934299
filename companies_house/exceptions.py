"""
Custom exception hierarchy for company lookups.

Two families only:
  - InvalidCRNFormat: the caller sent a malformed CRN (client error, 400).
  - UpstreamError:    the registry could not be reached or answered badly
                      (server error, 502).

Each exception carries a machine-readable code and the HTTP status the
API layer should report.
"""

from __future__ import annotations


class CompanyLookupError(Exception):
    """Base exception for all company lookup failures."""

    status_code: int = 500

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidCRNFormat(CompanyLookupError):
    """The CRN contains characters other than letters and digits (or is empty)."""

    status_code = 400

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CRN_FORMAT", message, details)


class UpstreamError(CompanyLookupError):
    """The upstream registry lookup failed."""

    status_code = 502

    def __init__(
        self, message: str, details: dict | None = None, code: str = "UPSTREAM_ERROR"
    ):
        super().__init__(code, message, details)


class UpstreamTransportError(UpstreamError):
    """The request never produced a response (DNS, connect, timeout...)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="UPSTREAM_TRANSPORT_FAILED")


class UpstreamStatusError(UpstreamError):
    """The registry answered with a non-success HTTP status."""

    def __init__(self, upstream_status: int, message: str, details: dict | None = None):
        self.upstream_status = upstream_status
        details = {"upstream_status": upstream_status, **(details or {})}
        super().__init__(message, details, code="UPSTREAM_STATUS")


class UpstreamPayloadError(UpstreamError):
    """The registry response does not have the expected shape."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="UPSTREAM_PAYLOAD_INVALID")
