"""Tests for the NMEA error types."""

import pytest

from gnss_analyzer import ErrorKind, NMEAError, SemanticError, StructuralError


class TestErrors:
    """Tests for StructuralError and SemanticError."""

    def test_structural_error_message(self):
        error = StructuralError("GGA", expected=10, actual=4)
        assert str(error) == "ParsingError: GGA frame too short: expected >=10 fields, got 4"
        assert error.kind is ErrorKind.STRUCTURAL
        assert error.constraint == ">= 10 fields"
        assert error.field is None

    def test_semantic_error_fields(self):
        error = SemanticError(
            "HDOP value out of range", field="hdop", value="0", constraint="0 < hdop <= 50.0"
        )
        assert str(error) == "InvalidData: HDOP value out of range"
        assert error.kind is ErrorKind.SEMANTIC
        assert error.message == "HDOP value out of range"
        assert (error.field, error.value) == ("hdop", "0")

    @pytest.mark.parametrize(
        "error",
        [StructuralError("GSV", 4, 1), SemanticError("bad")],
    )
    def test_common_base(self, error):
        assert isinstance(error, NMEAError)
        with pytest.raises(NMEAError):
            raise error
