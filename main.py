#!/usr/bin/env python3
"""
Companies House Lookup — Entry Point
=====================================

Looks a single CRN up in the registry and prints the matching records.

Usage:
    COMPANIES_HOUSE_API_KEY=... python main.py AB123456
    LOG_LEVEL=INFO python main.py AB123456        # show lookup logging

Exit codes:
    0  lookup succeeded (even with zero matches)
    1  registry lookup failed
    2  missing or malformed CRN
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from companies_house.client import CompaniesHouseClient
from companies_house.config import Settings
from companies_house.exceptions import InvalidCRNFormat, UpstreamError
from companies_house.models import CompanyRecord
from companies_house.pipeline import CompanyLookupPipeline
from companies_house.service import CompaniesHouseService

load_dotenv()


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_record(index: int, record: CompanyRecord) -> None:
    """Print one company record."""
    print(f"  {_BOLD}{index}. {record.title}{_RESET}")
    print(f"     Number:   {record.company_number}")
    if record.company_status:
        print(f"     Status:   {record.company_status}")
    if record.company_type:
        print(f"     Type:     {record.company_type}")
    if record.date_of_creation:
        print(f"     Created:  {record.date_of_creation}")
    if record.address_snippet:
        print(f"     Address:  {_DIM}{record.address_snippet}{_RESET}")


def print_records(crn: str, records: list[CompanyRecord]) -> None:
    """Pretty-print lookup results with ANSI color codes."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  COMPANIES HOUSE LOOKUP{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  CRN:         {crn}")
    print(f"  Matches:     {len(records)}")
    print(f"{'─' * _WIDTH}")

    if not records:
        print(f"  {_DIM}No companies matched.{_RESET}")
    for i, record in enumerate(records, start=1):
        _print_record(i, record)

    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run one lookup and print the result. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(args) != 1:
        print("Usage: python main.py <CRN>", file=sys.stderr)
        return 2
    crn = args[0]

    with CompaniesHouseClient(Settings()) as client:
        pipeline = CompanyLookupPipeline(CompaniesHouseService(client))
        try:
            records = pipeline.get_company_records(crn)
        except InvalidCRNFormat as e:
            print(f"{_RED}{_BOLD}400 {e.message}{_RESET}", file=sys.stderr)
            return 2
        except UpstreamError as e:
            print(f"{_RED}{_BOLD}Lookup failed [{e.code}]: {e.message}{_RESET}", file=sys.stderr)
            return 1

    print_records(crn, records)
    print(f"  {_GREEN}{_BOLD}LOOKUP COMPLETE{_RESET}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
