"""NMEA data types for parsed sentences.

This module defines the records that the sentence parsers fill in.

Design Decisions:
    1. Sentinel instead of Optional for satellite fields: GSV fields that
       cannot be read are stored as ``NOT_AVAILABLE`` (negative infinity)
       rather than ``None``. This keeps every ``SatelliteInfo`` attribute a
       plain float, so downstream code can aggregate with ``max()`` or filter
       with ``is_available()`` without ``None`` checks. The sentinel is never
       a legitimate measurement.

    2. Mutable fix record: ``GNSSData`` is created empty by the caller and
       updated in place as sentences arrive. A GGA sentence rewrites the
       position fields; a completed GSV sequence rewrites ``satellites``.

    3. fix_type as a label: the fix quality is stored as one of the labels
       in ``FIX_TYPE_LABELS`` so display code can show it directly.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

# Marker for a satellite field that was empty or unreadable in the sentence.
NOT_AVAILABLE = -math.inf

# GGA fix quality code -> fix type label.
# Codes 3 (PPS), 5 (RTK float) and 6 (dead reckoning) are not supported.
FIX_QUALITY_LABELS: dict[int, str] = {
    0: "No Fix",
    1: "GPS Fix",
    2: "DGPS Fix",
    4: "RTK Fix",
}

# Label of a record that has not seen a GGA sentence yet.
DEFAULT_FIX_TYPE = "No fix"

FIX_TYPE_LABELS = frozenset({DEFAULT_FIX_TYPE, *FIX_QUALITY_LABELS.values()})


class SentenceType(Enum):
    """Sentence kinds recognized by ``classify_sentence``."""

    UNKNOWN = 0
    FIX_DATA = 1
    SATELLITES_IN_VIEW = 2


def is_available(value: float) -> bool:
    """Return True unless ``value`` is the ``NOT_AVAILABLE`` sentinel."""
    return value != NOT_AVAILABLE


@dataclass
class SatelliteInfo:
    """Visibility of one satellite, as reported by a GSV sentence.

    Attributes:
        elevation_degrees: Elevation above the horizon, 0 to 90 degrees.
            ``NOT_AVAILABLE`` if the field was empty or unreadable.

        azimuth_degrees: Azimuth from true north, 0 to 359 degrees.
            ``NOT_AVAILABLE`` if the field was empty or unreadable.

        snr_dbhz: Signal-to-noise ratio in dB-Hz. Receivers leave this
            empty for satellites they are not tracking, in which case it
            is ``NOT_AVAILABLE``.

    Example:
        >>> info = SatelliteInfo(65.0, 290.0, NOT_AVAILABLE)
        >>> is_available(info.snr_dbhz)
        False
    """

    elevation_degrees: float
    azimuth_degrees: float
    snr_dbhz: float


@dataclass
class GNSSData:
    """Fix snapshot updated in place by ``parse_line``.

    A fresh instance holds neutral defaults. Each field is overwritten as soon
    as the corresponding sentence field has been validated, so after a
    parser error the record may be partially updated and should be
    discarded or re-validated by the caller.

    Attributes:
        num_satellites: Satellites used in the fix (GGA), 0 to 50.

        latitude_degrees: Latitude in decimal degrees, positive=North.

        longitude_degrees: Longitude in decimal degrees, positive=East.

        altitude_meters: Altitude above mean sea level, -500 to 10000 m.

        average_snr: Mean SNR over visible satellites. Never computed by the
            parsers; left for downstream analysis.

        horizontal_dilution_of_precision: HDOP, greater than 0 and at most
            50 once a GGA sentence has been parsed.

        vertical_dilution_of_precision: VDOP. Not carried by GGA or GSV, so
            it keeps its default.

        satellites: PRN -> ``SatelliteInfo`` for the last complete GSV
            sequence. Replaced as a whole when a sequence completes.

        fix_type: One of ``FIX_TYPE_LABELS``. ``"No fix"`` until the first
            GGA sentence is parsed.

        timestamp: UTC time of the last GGA sentence, combined with the
            processing date. ``None`` until a valid time of day is parsed.

    Example:
        >>> from gnss_analyzer.nmea import GSVSession, parse_line
        >>> data = GNSSData()
        >>> parse_line("$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47",
        ...            data, GSVSession())
        <SentenceType.FIX_DATA: 1>
        >>> data.fix_type
        'GPS Fix'
    """

    num_satellites: int = 0
    latitude_degrees: float = 0.0
    longitude_degrees: float = 0.0
    altitude_meters: float = 0.0
    average_snr: float = 0.0
    horizontal_dilution_of_precision: float = 0.0
    vertical_dilution_of_precision: float = 0.0
    satellites: dict[int, SatelliteInfo] = field(default_factory=dict)
    fix_type: str = DEFAULT_FIX_TYPE
    timestamp: datetime | None = None
