"""NMEA field parsing utilities.

This module provides utilities for splitting NMEA sentences into fields and
parsing individual fields. NMEA fields are comma-separated and may be empty
(consecutive commas indicate missing data). The ``parse_*_field`` helpers
return None for empty or unreadable fields so that each parser can decide
whether missing data is an error, a default, or a sentinel.
"""

import math

from gnss_analyzer.nmea.errors import SemanticError

# Number of degree digits in front of the minutes, by hemisphere.
# Latitude is DDMM.MMMM, longitude is DDDMM.MMMM.
_DEGREE_DIGITS = {"N": 2, "S": 2, "E": 3, "W": 3}

_NEGATIVE_HEMISPHERES = ("S", "W")


def tokenize(line: str) -> list[str]:
    """Split a sentence into its comma-separated fields.

    The talker/sentence code stays in field 0 and the ``*hh`` checksum
    suffix stays attached to the last field; neither is verified here.

    Example:
        >>> tokenize("$GPGSV,1,1,00*79")
        ['$GPGSV', '1', '1', '00*79']
    """
    return line.split(",")


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.
    Non-finite text such as "nan" or "inf" is also rejected, since no NMEA
    field carries those values.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty or unparseable

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        result = float(value)
    except ValueError:
        return None
    if not math.isfinite(result):
        return None
    return result


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid.

    Similar to parse_float_field but for integer values like satellite count,
    fix quality or satellite PRN. Only an optional sign followed by ASCII
    digits is accepted; ``int()`` alone would also take "1_0" or non-ASCII
    digits.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed integer value, or None if the field is empty or unparseable

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)


def _parse_coordinate_parts(value: str, degree_digits: int) -> tuple[int, float]:
    """Split an NMEA coordinate into degrees and minutes.

    The first ``degree_digits`` characters are whole degrees and the rest
    is decimal minutes.

    Args:
        value: Coordinate string in DDMM.MMMM or DDDMM.MMMM format
        degree_digits: 2 for latitude, 3 for longitude

    Returns:
        Tuple of (degrees, minutes)

    Raises:
        SemanticError: If the string is too short or either part is not a number

    Example:
        >>> _parse_coordinate_parts("4807.038", 2)  # 48° 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000", 3)  # 11° 31.000'
        (11, 31.0)
    """
    if len(value) < degree_digits:
        raise SemanticError(
            "String too short for degrees",
            field="coordinate",
            value=value,
            constraint=f"at least {degree_digits} degree digits",
        )

    degree_text = value[:degree_digits]
    minutes = parse_float_field(value[degree_digits:])
    if not (degree_text.isascii() and degree_text.isdigit()) or minutes is None:
        raise SemanticError(
            "Conversion failed",
            field="coordinate",
            value=value,
            constraint="integer degrees followed by decimal minutes",
        )
    return int(degree_text), minutes


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert NMEA coordinate (DDMM.MMMM / DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    The hemisphere selects the width of the degree part (2 digits for N/S,
    3 for E/W) and the sign of the result:
    - North/East = positive
    - South/West = negative

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in degrees-minutes format (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (positive for N/E, negative for S/W)

    Raises:
        SemanticError: If either field is empty, the hemisphere is unknown,
            or the coordinate cannot be split into degrees and minutes.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    if not value or not direction:
        raise SemanticError(
            "Empty latitude/longitude or direction",
            field="coordinate",
            value=value,
            constraint="non-empty value and hemisphere",
        )

    degree_digits = _DEGREE_DIGITS.get(direction)
    if degree_digits is None:
        raise SemanticError(
            f"Unknown hemisphere indicator {direction!r}",
            field="hemisphere",
            value=direction,
            constraint="one of N, S, E, W",
        )

    degrees, minutes = _parse_coordinate_parts(value, degree_digits)
    decimal_degrees = degrees + minutes / 60.0

    if direction in _NEGATIVE_HEMISPHERES:
        return -decimal_degrees

    return decimal_degrees
