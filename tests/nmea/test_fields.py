"""Tests for NMEA field parsing utilities."""

import pytest

from gnss_analyzer import SemanticError, convert_to_decimal_degrees
from gnss_analyzer.nmea.fields import parse_float_field, parse_int_field, tokenize


class TestConvertToDecimalDegrees:
    """Tests for convert_to_decimal_degrees function."""

    def test_latitude_north(self):
        assert convert_to_decimal_degrees("4807.038", "N") == pytest.approx(48.1173)

    def test_longitude_three_degree_digits(self):
        assert convert_to_decimal_degrees("11131.000", "E") == pytest.approx(111.5166667)

    def test_longitude_leading_zeros(self):
        assert convert_to_decimal_degrees("00012.345", "E") == pytest.approx(0.20575)

    def test_high_precision(self):
        result = convert_to_decimal_degrees("4807.03812345", "N")
        assert result == pytest.approx(48.11730208, rel=1e-9)

    @pytest.mark.parametrize(
        ("value", "positive", "negative"),
        [("4807.038", "N", "S"), ("3356.123", "N", "S"), ("11131.000", "E", "W")],
    )
    def test_opposite_hemispheres_negate(self, value, positive, negative):
        north_or_east = convert_to_decimal_degrees(value, positive)
        assert convert_to_decimal_degrees(value, negative) == -north_or_east

    def test_same_input_same_output(self):
        first = convert_to_decimal_degrees("5123.456", "N")
        assert convert_to_decimal_degrees("5123.456", "N") == first

    @pytest.mark.parametrize(("value", "direction"), [("", "N"), ("4807.038", ""), ("", "")])
    def test_empty_input_raises(self, value, direction):
        with pytest.raises(SemanticError, match="Empty latitude/longitude or direction"):
            convert_to_decimal_degrees(value, direction)

    @pytest.mark.parametrize(("value", "direction"), [("4", "N"), ("11", "E")])
    def test_too_short_raises(self, value, direction):
        with pytest.raises(SemanticError, match="too short"):
            convert_to_decimal_degrees(value, direction)

    @pytest.mark.parametrize(
        ("value", "direction"),
        [("4A07.038", "N"), ("48", "N"), ("4807.0x8", "N"), ("+1131.000", "E"), ("4807.038", "N ")],
    )
    def test_unparseable_raises(self, value, direction):
        with pytest.raises(SemanticError):
            convert_to_decimal_degrees(value, direction)

    def test_unknown_hemisphere_raises(self):
        with pytest.raises(SemanticError) as excinfo:
            convert_to_decimal_degrees("4807.038", "X")
        assert excinfo.value.field == "hemisphere"
        assert excinfo.value.value == "X"


class TestParseFields:
    """Tests for the parse_*_field helpers and tokenize."""

    def test_float_field(self):
        assert parse_float_field("545.4") == pytest.approx(545.4)
        assert parse_float_field("") is None
        assert parse_float_field("42*7A") is None

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", "Infinity"])
    def test_float_field_rejects_non_finite(self, value):
        assert parse_float_field(value) is None

    def test_int_field(self):
        assert parse_int_field("08") == 8
        assert parse_int_field("-3") == -3
        assert parse_int_field("") is None
        assert parse_int_field("1.5") is None

    @pytest.mark.parametrize("value", ["1_0", "٠٨", " 8", "8 ", "-", "+", "00*79"])
    def test_int_field_accepts_ascii_digits_only(self, value):
        assert parse_int_field(value) is None

    def test_tokenize_keeps_empty_fields_and_checksum(self):
        assert tokenize("$GPGGA,1,,2*47") == ["$GPGGA", "1", "", "2*47"]
