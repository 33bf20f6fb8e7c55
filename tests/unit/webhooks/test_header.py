"""Unit tests for the signature header codec."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eventdripper.kernel.errors import InvalidHeaderError, NoSignatureError, NoValidSignatureError
from eventdripper.kernel.time import from_unix
from eventdripper.webhooks import SignedHeader, make_header, parse_header

AT = datetime(2020, 9, 25, 12, 19, 16, tzinfo=UTC)
SIG_A = bytes.fromhex("5257a869e7ecebeda32affa62cdca3fa51cad7e77a0e56ff536d0ce8e108d8bd")
SIG_B = bytes.fromhex("9e0d1c4b6f7a")


# ---------------------------------------------------------------------------
# make_header
# ---------------------------------------------------------------------------
class TestMakeHeader:
    def test_format(self) -> None:
        assert make_header(AT, SIG_A) == f"t=1601036356,v1={SIG_A.hex()}"

    def test_hex_is_lowercase(self) -> None:
        header = make_header(AT, b"\xab\xcd")
        assert header.endswith("v1=abcd")

    def test_drops_sub_second_precision(self) -> None:
        assert make_header(AT + timedelta(microseconds=500_000), SIG_B) == make_header(AT, SIG_B)


# ---------------------------------------------------------------------------
# parse_header
# ---------------------------------------------------------------------------
class TestParseHeader:
    def test_round_trip(self) -> None:
        parsed = parse_header(make_header(AT, SIG_A))
        assert parsed == SignedHeader(timestamp=AT, signatures=(SIG_A,))

    @given(
        seconds=st.integers(min_value=0, max_value=2**33),
        signature=st.binary(min_size=1, max_size=64),
    )
    def test_round_trip_property(self, seconds: int, signature: bytes) -> None:
        at = from_unix(seconds)
        parsed = parse_header(make_header(at, signature))
        assert parsed.timestamp == at
        assert parsed.signatures == (signature,)

    def test_timestamp_is_utc_aware(self) -> None:
        parsed = parse_header(f"t=0,v1={SIG_B.hex()}")
        assert parsed.timestamp == datetime(1970, 1, 1, tzinfo=UTC)
        assert parsed.timestamp.tzinfo is not None

    def test_multiple_signatures_keep_order(self) -> None:
        parsed = parse_header(f"t=1601036356,v1={SIG_A.hex()},v1={SIG_B.hex()}")
        assert parsed.signatures == (SIG_A, SIG_B)

    def test_uppercase_hex_accepted(self) -> None:
        parsed = parse_header(f"t=1601036356,v1={SIG_B.hex().upper()}")
        assert parsed.signatures == (SIG_B,)

    def test_unknown_versions_and_fields_ignored(self) -> None:
        parsed = parse_header(f"t=1601036356,v0=garbage,v1={SIG_A.hex()},x-extra=1")
        assert parsed.signatures == (SIG_A,)

    def test_invalid_hex_under_current_version_skipped(self) -> None:
        parsed = parse_header(f"t=1601036356,v1=zz-not-hex,v1={SIG_B.hex()},v1=abc")
        assert parsed.signatures == (SIG_B,)

    def test_last_timestamp_wins(self) -> None:
        parsed = parse_header(f"t=1,v1={SIG_B.hex()},t=1601036356")
        assert parsed.timestamp == AT

    def test_missing_timestamp_reads_as_epoch(self) -> None:
        parsed = parse_header(f"v1={SIG_B.hex()}")
        assert parsed.timestamp == from_unix(0)

    def test_empty_header_raises_no_signature(self) -> None:
        with pytest.raises(NoSignatureError):
            parse_header("")

    @pytest.mark.parametrize(
        "header",
        [
            "t=1601036356,missing-equality",
            "t=1601036356,v1=ab=cd",
            "t=1601036356,=abcd",
            "t=1601036356,,v1=abcd",
        ],
    )
    def test_malformed_field_raises_invalid_header(self, header: str) -> None:
        with pytest.raises(InvalidHeaderError):
            parse_header(header)

    @pytest.mark.parametrize("value", ["not-a-number", "", "12.5", "1_000", " 12", "١٢"])
    def test_bad_timestamp_raises_invalid_header(self, value: str) -> None:
        with pytest.raises(InvalidHeaderError):
            parse_header(f"t={value},v1={SIG_B.hex()}")

    @pytest.mark.parametrize("value", ["300000000000", "-62135596801", "99999999999999999999"])
    def test_timestamp_outside_datetime_range_raises_invalid_header(self, value: str) -> None:
        with pytest.raises(InvalidHeaderError) as excinfo:
            parse_header(f"t={value},v1={SIG_B.hex()}")
        assert excinfo.value.detail == {"timestamp": value}

    def test_timestamp_checked_before_signatures(self) -> None:
        with pytest.raises(InvalidHeaderError):
            parse_header("t=not-a-number")

    def test_no_current_version_signature_raises(self) -> None:
        with pytest.raises(NoValidSignatureError):
            parse_header("t=1601036356,c=not-valid")

    def test_only_undecodable_signatures_raises(self) -> None:
        with pytest.raises(NoValidSignatureError):
            parse_header("t=1601036356,v1=xyz")

    def test_signed_header_is_frozen(self) -> None:
        parsed = parse_header(make_header(AT, SIG_A))
        with pytest.raises(Exception):
            parsed.timestamp = AT  # type: ignore[misc]
