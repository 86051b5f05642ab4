"""Tests for the confirmation-message validator."""

import pytest

from momo_ledger.parsing.validator import validate


class TestValidate:
    """Tests for validate()."""

    @pytest.mark.parametrize(
        "raw",
        [
            "DBC1MV31SMJ Confirmed. Tsh16,000.00 sent to TIPS-NMB",
            "ABC123 Failed. Not enough balance",
            "12345 anything",
            "X\tConfirmed",
        ],
    )
    def test_accepts_transaction_code_prefix(self, raw: str) -> None:
        """Test that a leading code followed by whitespace is accepted."""
        assert validate(raw) is True

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "Hello there, your bundle expires soon",
            "abc123 Confirmed. lower-case code",
            " DBC1MV31SMJ Confirmed. leading space",
            "DBC1MV31SMJ",
            "DBC1-MV31 Confirmed.",
        ],
    )
    def test_rejects_other_text(self, raw: str) -> None:
        """Test that promotional and malformed text is rejected."""
        assert validate(raw) is False

    @pytest.mark.parametrize("raw", [None, 42, b"DBC1MV31SMJ Confirmed.", ["DBC1 x"]])
    def test_rejects_non_strings(self, raw: object) -> None:
        """Test that non-string input is rejected without raising."""
        assert validate(raw) is False
