"""GGA sentence parser.

GGA (Global Positioning System Fix Data) provides the position fix
information: time, coordinates, fix quality, satellites used, HDOP and
altitude.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,,*47
           |      |        | |         | | |  |   |     | |
           |      |        | |         | | |  |   |     | +-- Geoid height (optional)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL (M=meters)
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality
           |      |        | +---------+-- Longitude (DDDMM.MMMM) + E/W
           |      +--------+-- Latitude (DDMM.MMMM) + N/S
           +-- UTC time (HHMMSS.sss)

Fix Quality Values accepted:
    0 = Invalid (no fix)
    1 = GPS fix (SPS)
    2 = DGPS fix
    4 = RTK Fixed
Any other code is rejected.

Unlike the GSV parser, every field from the time to the altitude is
mandatory and range checked. The fields are written to the record in the
order above, so a failure leaves the earlier fields updated.
"""

import logging
from datetime import date, datetime, time, timezone

from gnss_analyzer.nmea.errors import NMEAError, SemanticError, StructuralError
from gnss_analyzer.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
)
from gnss_analyzer.nmea.types import FIX_QUALITY_LABELS, NOT_AVAILABLE, GNSSData

logger = logging.getLogger(__name__)

# Fields up to and including the altitude (indices 0-9)
_MINIMUM_FIELD_COUNT = 10

_MAX_SATELLITES = 50
_MAX_HDOP = 50.0
_MIN_ALTITUDE_METERS = -500.0
_MAX_ALTITUDE_METERS = 10000.0


def _processing_date() -> date:
    """Today's date in UTC; GGA carries only the time of day."""
    return datetime.now(timezone.utc).date()


def _parse_time_of_day(value: str) -> time | None:
    """Parse the HHMMSS prefix of the GGA time field.

    Fractional seconds are ignored.

    Args:
        value: UTC time field (e.g., "123519" or "123519.00")

    Returns:
        The time of day, or None if the digits do not form a valid time
        (e.g., "256100"). A non-digit character anywhere in HHMMSS (e.g.,
        "12a519") also gives None rather than reading that group as 0.
        An invalid time is not an error.

    Raises:
        SemanticError: If the field is shorter than 6 characters.
    """
    if len(value) < 6:
        raise SemanticError(
            "Invalid UTC time in GGA frame",
            field="utc_time",
            value=value,
            constraint="hhmmss",
        )

    digits = value[:6]
    if not (digits.isascii() and digits.isdigit()):
        return None

    try:
        return time(int(digits[0:2]), int(digits[2:4]), int(digits[4:6]))
    except ValueError:
        return None


def _parse_fix_type(value: str) -> str:
    """Map the fix quality field to its label.

    An empty field means code 0: the receiver reports no fix.
    """
    code = parse_int_field(value) if value else 0
    if code is None:
        raise SemanticError(
            "Fix quality is not an integer",
            field="fix_quality",
            value=value,
            constraint="one of 0, 1, 2, 4",
        )

    label = FIX_QUALITY_LABELS.get(code)
    if label is None:
        raise SemanticError(
            f"Unknown fix quality code: {code}",
            field="fix_quality",
            value=value,
            constraint="one of 0, 1, 2, 4",
        )
    return label


def _parse_num_satellites(value: str) -> int:
    constraint = f"0 <= satellites <= {_MAX_SATELLITES}"
    num_satellites = parse_int_field(value)
    if num_satellites is None:
        raise SemanticError(
            "Number of satellites is not an integer",
            field="num_satellites",
            value=value,
            constraint=constraint,
        )
    if not 0 <= num_satellites <= _MAX_SATELLITES:
        raise SemanticError(
            "Number of satellites out of range",
            field="num_satellites",
            value=value,
            constraint=constraint,
        )
    return num_satellites


def _parse_hdop(value: str) -> float:
    constraint = f"0 < hdop <= {_MAX_HDOP}"
    hdop = parse_float_field(value)
    if hdop is None:
        raise SemanticError(
            "HDOP is not a number",
            field="hdop",
            value=value,
            constraint=constraint,
        )
    # Zero is excluded: a receiver reporting HDOP 0 has no geometry.
    if not 0.0 < hdop <= _MAX_HDOP:
        raise SemanticError(
            "HDOP value out of range",
            field="hdop",
            value=value,
            constraint=constraint,
        )
    return hdop


def _parse_altitude(value: str) -> float:
    constraint = f"{_MIN_ALTITUDE_METERS} <= altitude <= {_MAX_ALTITUDE_METERS}"
    altitude = parse_float_field(value)
    if altitude is None:
        raise SemanticError(
            "Altitude is not a number",
            field="altitude",
            value=value,
            constraint=constraint,
        )
    if not _MIN_ALTITUDE_METERS <= altitude <= _MAX_ALTITUDE_METERS:
        raise SemanticError(
            "Altitude out of realistic bounds",
            field="altitude",
            value=value,
            constraint=constraint,
        )
    return altitude


def _update_gnss_data(tokens: list[str], data: GNSSData) -> None:
    """Validate GGA fields and write them into ``data``.

    Maps NMEA field indices to GNSSData attributes:
        tokens[1] -> timestamp (HHMMSS on the processing date)
        tokens[2] -> latitude_degrees (with tokens[3], N/S)
        tokens[4] -> longitude_degrees (with tokens[5], E/W)
        tokens[6] -> fix_type
        tokens[7] -> num_satellites
        tokens[8] -> horizontal_dilution_of_precision
        tokens[9] -> altitude_meters
    """
    time_of_day = _parse_time_of_day(tokens[1])
    if time_of_day is not None:
        data.timestamp = datetime.combine(
            _processing_date(), time_of_day, tzinfo=timezone.utc
        )

    data.latitude_degrees = convert_to_decimal_degrees(tokens[2], tokens[3])

    longitude = convert_to_decimal_degrees(tokens[4], tokens[5])
    if longitude == NOT_AVAILABLE:
        raise SemanticError(
            "Longitude conversion failed",
            field="longitude",
            value=tokens[4],
            constraint="finite decimal degrees",
        )
    data.longitude_degrees = longitude

    data.fix_type = _parse_fix_type(tokens[6])
    data.num_satellites = _parse_num_satellites(tokens[7])
    data.horizontal_dilution_of_precision = _parse_hdop(tokens[8])
    data.altitude_meters = _parse_altitude(tokens[9])


def parse_gga(tokens: list[str], data: GNSSData) -> None:
    """Parse the fields of a GGA sentence into ``data``.

    Args:
        tokens: Comma-separated fields of the sentence, as returned by
            ``tokenize``. tokens[0] is the "$GPGGA" code.
        data: Record to update in place.

    Raises:
        StructuralError: If there are fewer than 10 fields.
        SemanticError: If a field is empty, unparseable or out of range.
            An invalid time of day is not an error; the timestamp is
            left as it was.

    Example:
        >>> data = GNSSData()
        >>> parse_gga(tokenize("$GPGGA,123519,4807.038,N,11131.000,E,1,08,0.9,545.4,M,,*47"), data)
        >>> data.latitude_degrees
        48.1173
        >>> data.num_satellites
        8
    """
    try:
        if len(tokens) < _MINIMUM_FIELD_COUNT:
            raise StructuralError("GGA", _MINIMUM_FIELD_COUNT, len(tokens))
        _update_gnss_data(tokens, data)
    except NMEAError as error:
        logger.warning("[parse_gga] %s", error)
        raise
