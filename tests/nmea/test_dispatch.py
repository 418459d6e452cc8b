"""Tests for sentence classification and line dispatch."""

import copy

import pytest

from gnss_analyzer import (
    GNSSData,
    GSVSession,
    NMEAError,
    SemanticError,
    SentenceType,
    StructuralError,
    classify_sentence,
    parse_line,
)

GGA = "$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47"


class TestClassifySentence:
    """Tests for classify_sentence function."""

    def test_fix_data(self):
        assert classify_sentence(GGA) is SentenceType.FIX_DATA

    def test_satellites_in_view(self):
        assert classify_sentence("$GPGSV,3,1,12") is SentenceType.SATELLITES_IN_VIEW

    @pytest.mark.parametrize(
        "line",
        [
            "$GPXXX,1,2,3",
            "$GPRMC,130559.00,A,4517.27361,N,00552.34637,E,0.018,,220623,,,A*6C",
            "$GPGSA,A,3,04,05,09,12,24,25,29,31,,,,,1.8,1.0,1.4*30",
            "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F",
            "GPGGA,123519,4807.038,N",
            " $GPGGA,123519",
            "",
        ],
    )
    def test_everything_else_is_unknown(self, line):
        assert classify_sentence(line) is SentenceType.UNKNOWN


class TestParseLine:
    """Tests for parse_line function."""

    def test_gga_updates_record(self):
        data = GNSSData()
        assert parse_line(GGA, data, GSVSession()) is SentenceType.FIX_DATA
        assert data.latitude_degrees == pytest.approx(48.1173, abs=0.002)
        assert data.longitude_degrees == pytest.approx(111.517, abs=0.002)
        assert data.num_satellites == 8
        assert data.fix_type == "GPS Fix"
        assert data.altitude_meters == pytest.approx(545.4)
        assert data.horizontal_dilution_of_precision == pytest.approx(0.9)

    def test_gga_error_propagates(self):
        with pytest.raises(SemanticError):
            parse_line("$GPGGA,094500,,,,,0,00,99.9,,,,,,*48", GNSSData(), GSVSession())

    def test_short_gsv_raises_structural_error(self):
        with pytest.raises(StructuralError):
            parse_line("$GPGSV,1,1", GNSSData(), GSVSession())

    def test_gsv_sequence(self):
        data = GNSSData()
        session = GSVSession()
        parse_line("$GPGSV,2,1,03,02,65,290,42,04,40,150,38", data, session)
        assert parse_line("$GPGSV,2,2,03,09,55,050,44", data, session) is (
            SentenceType.SATELLITES_IN_VIEW
        )
        assert set(session.satellites) == {2, 4, 9}
        assert set(data.satellites) == {2, 4, 9}

    def test_unknown_sentence_is_a_no_op(self):
        data = GNSSData()
        parse_line(GGA, data, GSVSession())
        before = copy.deepcopy(data)
        session = GSVSession()

        assert parse_line("$GPXXX,1,2,3", data, session) is SentenceType.UNKNOWN
        assert data == before
        assert dict(session.satellites) == {}

    def test_unknown_sentence_is_not_validated(self):
        data = GNSSData()
        parse_line("$GPRMC,garbage", data, GSVSession())
        assert data == GNSSData()

    def test_mixed_stream(self):
        lines = [
            "$GPGSV,2,1,05,02,65,290,42,04,40,150,38,09,55,050,44,12,32,200,36",
            GGA,
            "$GPGSA,A,3,04,05,09,12,24,25,29,31,,,,,1.8,1.0,1.4*30",
            "$GPGSV,2,2,05,25,10,020,",
        ]
        data = GNSSData()
        session = GSVSession()
        handled = [parse_line(line, data, session) for line in lines]

        assert handled == [
            SentenceType.SATELLITES_IN_VIEW,
            SentenceType.FIX_DATA,
            SentenceType.UNKNOWN,
            SentenceType.SATELLITES_IN_VIEW,
        ]
        assert data.fix_type == "GPS Fix"
        assert sorted(data.satellites) == [2, 4, 9, 12, 25]

    def test_caller_can_continue_after_error(self):
        data = GNSSData()
        session = GSVSession()
        with pytest.raises(NMEAError):
            parse_line("$GPGGA,123519,4807.038,N,11131.000,E,7,08,0.9,545.4,M,,*47", data, session)
        parse_line(GGA, data, session)
        assert data.fix_type == "GPS Fix"
