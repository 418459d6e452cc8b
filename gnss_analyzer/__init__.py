"""GNSS analyzer package for parsing NMEA fix and satellite data."""

from gnss_analyzer.nmea import (
    NOT_AVAILABLE,
    ErrorKind,
    GNSSData,
    GSVSession,
    NMEAError,
    SatelliteInfo,
    SemanticError,
    SentenceType,
    StructuralError,
    classify_sentence,
    convert_to_decimal_degrees,
    parse_gga,
    parse_gsv,
    parse_line,
)

__all__ = [
    "NOT_AVAILABLE",
    "ErrorKind",
    "GNSSData",
    "GSVSession",
    "NMEAError",
    "SatelliteInfo",
    "SemanticError",
    "SentenceType",
    "StructuralError",
    "classify_sentence",
    "convert_to_decimal_degrees",
    "parse_gga",
    "parse_gsv",
    "parse_line",
]
