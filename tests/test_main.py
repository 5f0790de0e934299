"""Tests for the command-line entry point (no registry calls)."""

from __future__ import annotations

from unittest.mock import patch

import main
from companies_house.exceptions import UpstreamTransportError
from companies_house.models import CompanyRecord
from companies_house.validators import CRN_FORMAT_MESSAGE


class TestMain:
    def test_missing_argument_exits_2(self, capsys) -> None:
        assert main.main([]) == 2
        assert "Usage" in capsys.readouterr().err

    def test_malformed_crn_exits_2(self, capsys) -> None:
        assert main.main(["msf@£@$SDFSDFSDF12313"]) == 2
        assert CRN_FORMAT_MESSAGE in capsys.readouterr().err

    def test_prints_records(self, capsys) -> None:
        records = [
            CompanyRecord(company_number="AB123456", title="EXAMPLE TRADING LIMITED"),
        ]
        with patch(
            "main.CompaniesHouseService.get_company_records", return_value=records
        ):
            assert main.main(["AB123456"]) == 0

        out = capsys.readouterr().out
        assert "EXAMPLE TRADING LIMITED" in out
        assert "Matches:     1" in out

    def test_upstream_failure_exits_1(self, capsys) -> None:
        with patch(
            "main.CompaniesHouseService.get_company_records",
            side_effect=UpstreamTransportError("connection refused"),
        ):
            assert main.main(["AB123456"]) == 1
        assert "UPSTREAM_TRANSPORT_FAILED" in capsys.readouterr().err
