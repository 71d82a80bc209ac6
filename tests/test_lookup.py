"""Tests for code lookups and edge-case guidance."""

import logging

import pytest

from upi_codes.lookup import (
    PENDING_SUFFIX,
    RETRY_SUFFIX,
    USER_ACTION_SUFFIX,
    get_code_info,
    get_dispute_info,
    handle_edge_case,
)
from upi_codes.models import Category, Status
from upi_codes.tables import DISPUTE_REASON_CODES, MANDATE_ERROR_CODES, UPI_ERROR_CODES


class TestGetCodeInfo:
    """Tests for get_code_info."""

    @pytest.mark.parametrize("code", list(UPI_ERROR_CODES))
    def test_case_insensitive(self, code: str) -> None:
        assert get_code_info(code) == get_code_info(code.lower())

    def test_success_codes(self) -> None:
        assert get_code_info("00").status == Status.SUCCESS
        assert get_code_info("000").status == Status.SUCCESS

    def test_mandate_code(self) -> None:
        info = get_code_info("ap11")
        assert info.code == "AP11"
        assert info.description == "Authentication failed"
        assert info.category == Category.TECHNICAL

    def test_general_table_checked_first(self) -> None:
        assert get_code_info("u3") is UPI_ERROR_CODES["U3"]

    @pytest.mark.parametrize("code", ["ZZ9", "ap99", "hello world", "0", "U2"])
    def test_unknown_code_defaults(self, code: str) -> None:
        info = get_code_info(code)
        assert info.code == code.upper()
        assert info.description == "Unknown"
        assert info.category == Category.TECHNICAL
        assert info.status == Status.REJECTED
        assert info.handling == "Contact support"

    def test_empty_string(self) -> None:
        info = get_code_info("")
        assert info.code == ""
        assert info.description == "Unknown"

    def test_unknown_code_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="upi_codes"):
            get_code_info("nope")
        assert "NOPE" in caplog.text

    def test_unknown_code_log_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="upi_codes"):
            get_code_info("nope")
            get_dispute_info("zz")

        assert [r.extra for r in caplog.records] == [
            {"code": "NOPE", "table": "response"},
            {"code": "ZZ", "table": "dispute"},
        ]

    def test_every_record_is_complete(self) -> None:
        for code in [*UPI_ERROR_CODES, *MANDATE_ERROR_CODES, "unknown"]:
            info = get_code_info(code)
            assert info.description
            assert info.status in list(Status)


class TestGetDisputeInfo:
    """Tests for get_dispute_info."""

    @pytest.mark.parametrize("code", list(DISPUTE_REASON_CODES))
    def test_known_codes_are_chargebacks(self, code: str) -> None:
        assert get_dispute_info(code).dispute_type == "Chargeback"

    def test_lowercase(self) -> None:
        info = get_dispute_info("u10")
        assert info.code == "U10"
        assert info.description == "Goods/Services not received"
        assert info.flag == "U10"

    def test_unknown_dispute(self) -> None:
        info = get_dispute_info("ap01")
        assert info.code == "AP01"
        assert info.description == "Unknown Dispute"
        assert info.dispute_type == "Chargeback"
        assert info.tat == "T+5"
        assert info.flag == "Unknown"


class TestHandleEdgeCase:
    """Tests for handle_edge_case rule precedence."""

    def test_pending_timeout(self) -> None:
        advice = handle_edge_case("091")
        assert advice.code == "091"
        assert advice.suggested_action == f"Wait; do not reinitiate. {PENDING_SUFFIX}"

    @pytest.mark.parametrize("code", ["04", "05"])
    def test_business_technical_gets_retry(self, code: str) -> None:
        advice = handle_edge_case(code)
        assert advice.suggested_action.endswith(RETRY_SUFFIX)
        assert USER_ACTION_SUFFIX not in advice.suggested_action

    def test_technical_rejected(self) -> None:
        advice = handle_edge_case("xy")
        assert advice.code == "XY"
        assert advice.suggested_action == "Sender bank down. Retry after a short delay."

    def test_business(self) -> None:
        advice = handle_edge_case("AP01")
        assert advice.suggested_action == (
            "Account is blocked; contact bank. User intervention required; do not retry automatically."
        )

    def test_success_has_no_suffix(self) -> None:
        assert handle_edge_case("00").suggested_action == "No action needed."

    def test_unknown_code_is_retried(self) -> None:
        assert handle_edge_case("??").suggested_action == f"Contact support {RETRY_SUFFIX}"
