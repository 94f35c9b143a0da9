"""
Tests for value normalisation.

Covers address padding, decimal/hex literal conversion and the payloads
that must pass through untouched.
"""
from __future__ import annotations

import re

import pytest

from memaddr_parser.parser.normalizer import (
    hex_literal,
    is_symbolic,
    normalize_address,
    normalize_literal,
)

_CANONICAL_RE = re.compile(r"^0x[0-9a-f]{6}$")


# ─────────────────────────────────────────────────────────────────────────────
# hex_literal
# ─────────────────────────────────────────────────────────────────────────────


class TestHexLiteral:
    @pytest.mark.parametrize(
        "value", [0, 1, 9, 10, 255, 256, 4095, 65535, 1048575, 16777215]
    )
    def test_always_six_lowercase_digits(self, value):
        assert _CANONICAL_RE.match(hex_literal(value))

    def test_sampled_range_is_canonical(self):
        for value in range(0, 16_777_216, 9973):
            text = hex_literal(value)
            assert _CANONICAL_RE.match(text)
            assert int(text, 16) == value

    def test_known_values(self):
        assert hex_literal(0) == "0x000000"
        assert hex_literal(100) == "0x000064"
        assert hex_literal(1023) == "0x0003ff"

    def test_wider_values_not_truncated(self):
        assert hex_literal(4294967295) == "0xffffffff"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            hex_literal(-1)


# ─────────────────────────────────────────────────────────────────────────────
# normalize_address
# ─────────────────────────────────────────────────────────────────────────────


class TestNormalizeAddress:
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ("0", "0x000000"),
            ("1", "0x000001"),
            ("12", "0x000012"),
            ("123", "0x000123"),
            ("1234", "0x001234"),
            ("12345", "0x012345"),
            ("123456", "0x123456"),
        ],
    )
    def test_padding(self, payload, expected):
        assert normalize_address(payload) == expected

    def test_existing_prefix_stripped(self):
        assert normalize_address("0x1234") == "0x001234"

    def test_wide_address_kept(self):
        assert normalize_address("0045c120") == "0x0045c120"

    def test_case_preserved(self):
        assert normalize_address("00b241") == "0x00b241"
        assert normalize_address("AB") == "0x0000AB"

    def test_empty_stays_empty(self):
        assert normalize_address("") == ""


# ─────────────────────────────────────────────────────────────────────────────
# normalize_literal
# ─────────────────────────────────────────────────────────────────────────────


class TestNormalizeLiteral:
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ("0", "0x000000"),
            ("5", "0x000005"),
            ("255", "0x0000ff"),
            ("65535", "0x00ffff"),
            ("16777215", "0xffffff"),
            ("+10", "0x00000a"),
        ],
    )
    def test_decimal_converted_to_hex(self, payload, expected):
        assert normalize_literal(payload) == expected

    @pytest.mark.parametrize("constant", ["n", "t", "true", "false", "lvlintro"])
    def test_symbolic_constants_verbatim(self, constant):
        assert normalize_literal(constant) == constant

    def test_negative_decimal_not_hex_encoded(self):
        assert normalize_literal("-1") == "-1"
        assert normalize_literal("-100") == "-100"

    def test_float_text_verbatim(self):
        assert normalize_literal("1.5") == "1.5"
        assert normalize_literal("-0.25") == "-0.25"

    def test_hex_prefixed_literal_padded(self):
        assert normalize_literal("0xff") == "0x0000ff"

    def test_empty_stays_empty(self):
        assert normalize_literal("") == ""


class TestIsSymbolic:
    def test_case_insensitive(self):
        assert is_symbolic("TRUE")
        assert is_symbolic("LvlIntro")

    def test_numbers_are_not_symbolic(self):
        assert not is_symbolic("10")
        assert not is_symbolic("nt")
