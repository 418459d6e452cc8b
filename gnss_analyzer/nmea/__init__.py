"""NMEA 0183 parser for GGA and GSV sentences."""

from gnss_analyzer.nmea.dispatch import classify_sentence, parse_line
from gnss_analyzer.nmea.errors import (
    ErrorKind,
    NMEAError,
    SemanticError,
    StructuralError,
)
from gnss_analyzer.nmea.fields import convert_to_decimal_degrees, tokenize
from gnss_analyzer.nmea.gga import parse_gga
from gnss_analyzer.nmea.gsv import GSVSession, parse_gsv
from gnss_analyzer.nmea.types import (
    FIX_TYPE_LABELS,
    NOT_AVAILABLE,
    GNSSData,
    SatelliteInfo,
    SentenceType,
    is_available,
)

__all__ = [
    "FIX_TYPE_LABELS",
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
    "is_available",
    "parse_gga",
    "parse_gsv",
    "parse_line",
    "tokenize",
]
