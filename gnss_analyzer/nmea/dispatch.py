"""Sentence classification and dispatch.

``parse_line`` is the entry point for a stream of NMEA lines: it looks at
the sentence code, splits the line into fields and hands them to the
matching parser. Only GPS-talker GGA and GSV sentences are supported;
anything else, including other sentence types from the same receiver
(RMC, GSA, VTG, ...), is ignored.

Typical use with one receiver::

    data = GNSSData()
    session = GSVSession()
    for line in lines:
        try:
            parse_line(line, data, session)
        except NMEAError as error:
            ...  # discard or re-validate data
"""

import logging

from gnss_analyzer.nmea.fields import tokenize
from gnss_analyzer.nmea.gga import parse_gga
from gnss_analyzer.nmea.gsv import GSVSession, parse_gsv
from gnss_analyzer.nmea.types import GNSSData, SentenceType

logger = logging.getLogger(__name__)

_SENTENCE_PREFIXES: tuple[tuple[str, SentenceType], ...] = (
    ("$GPGGA", SentenceType.FIX_DATA),
    ("$GPGSV", SentenceType.SATELLITES_IN_VIEW),
)


def classify_sentence(line: str) -> SentenceType:
    """Identify the sentence type from the start of the line.

    Example:
        >>> classify_sentence("$GPGGA,123519,4807.038,N,...")
        <SentenceType.FIX_DATA: 1>
        >>> classify_sentence("$GPRMC,130559.00,A,...")
        <SentenceType.UNKNOWN: 0>
    """
    for prefix, sentence_type in _SENTENCE_PREFIXES:
        if line.startswith(prefix):
            return sentence_type
    return SentenceType.UNKNOWN


def parse_line(line: str, data: GNSSData, session: GSVSession) -> SentenceType:
    """Parse one NMEA line into ``data``.

    Args:
        line: One sentence without line terminator.
        data: Fix record updated in place.
        session: GSV accumulation state for the source ``line`` came from.

    Returns:
        The type of the sentence. ``SentenceType.UNKNOWN`` means the line
        was ignored and neither ``data`` nor ``session`` changed.

    Raises:
        StructuralError: If the sentence has too few fields.
        SemanticError: If a field is invalid or out of range.
    """
    sentence_type = classify_sentence(line)

    if sentence_type is SentenceType.FIX_DATA:
        parse_gga(tokenize(line), data)
    elif sentence_type is SentenceType.SATELLITES_IN_VIEW:
        parse_gsv(tokenize(line), data, session)
    else:
        logger.debug("Ignoring unsupported sentence: %s", line[:6])

    return sentence_type
