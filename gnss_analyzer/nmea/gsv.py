"""GSV sentence parser.

GSV (Satellites in View) lists the satellites the receiver can see. Each
sentence holds at most four satellites, so a receiver tracking more splits
the list over a sequence of sentences that share the same message count.

GSV Sentence Format:
    $GPGSV,3,1,12,02,65,290,42,04,40,150,38,09,55,050,44,12,32,200,36*7A
           | | |  |  |  |   |  +-- next satellite ...
           | | |  |  |  |   +-- SNR (dB-Hz, empty when not tracking)
           | | |  |  |  +-- Azimuth (degrees)
           | | |  |  +-- Elevation (degrees)
           | | |  +-- Satellite PRN
           | | +-- Satellites in view
           | +-- Message index (1..N)
           +-- Total number of messages (N)

Accumulation:
    Satellites are collected in a ``GSVSession`` owned by the caller. Message
    index 1 starts a new sequence and clears the session; the following
    messages add to it. When the message whose index equals the expected
    count arrives, the collected satellites are published into
    ``GNSSData.satellites``.

The checksum suffix stays attached to the last field, so the SNR of the
last satellite in a sentence reads as NOT_AVAILABLE.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from gnss_analyzer.nmea.errors import NMEAError, SemanticError, StructuralError
from gnss_analyzer.nmea.fields import parse_float_field, parse_int_field
from gnss_analyzer.nmea.types import NOT_AVAILABLE, GNSSData, SatelliteInfo

logger = logging.getLogger(__name__)

# Message count, message index and satellites in view (indices 0-3)
_MINIMUM_FIELD_COUNT = 4

_FIRST_SATELLITE_INDEX = 4
_FIELDS_PER_SATELLITE = 4


class GSVSession:
    """Accumulation state for one stream of GSV sentences.

    A GSV sequence spans several sentences, so the satellites collected so
    far must survive between ``parse_line`` calls. Keep one session per
    GNSS source; two receivers sharing a session would clear each other's
    sequences. A session is not thread-safe: callers sharing it between
    threads must serialize the calls that use it.

    A sequence is only published when its sentences arrive as 1, 2, ..., N
    with the same message count N. A missing, repeated or foreign sentence
    breaks the sequence: its satellites are still collected, but nothing is
    published until the next message 1.

    Example:
        >>> from gnss_analyzer.nmea import parse_line
        >>> session = GSVSession()
        >>> data = GNSSData()
        >>> parse_line("$GPGSV,2,1,05,02,65,290,42,04,40,150,38,,,,,,,,*7A", data, session)
        <SentenceType.SATELLITES_IN_VIEW: 2>
        >>> session.complete
        False
        >>> len(session.satellites)
        2
    """

    def __init__(self) -> None:
        self._satellites: dict[int, SatelliteInfo] = {}
        self._expected_messages: int = 0
        self._last_message_index: int = 0
        self._satellites_in_view: int | None = None

    @property
    def satellites(self) -> Mapping[int, SatelliteInfo]:
        """Read-only view of the satellites collected in the current sequence."""
        return MappingProxyType(self._satellites)

    @property
    def expected_messages(self) -> int:
        """Message count announced by the first sentence, 0 before any."""
        return self._expected_messages

    @property
    def last_message_index(self) -> int:
        return self._last_message_index

    @property
    def satellites_in_view(self) -> int | None:
        """Satellite total reported by the last sentence, None if unreadable."""
        return self._satellites_in_view

    @property
    def complete(self) -> bool:
        """True once the last message of a started sequence has been parsed."""
        return (
            self._expected_messages > 0
            and self._last_message_index == self._expected_messages
        )

    def reset(self) -> None:
        """Forget the current sequence."""
        self._satellites.clear()
        self._expected_messages = 0
        self._last_message_index = 0
        self._satellites_in_view = None

    def start_sequence(self, expected_messages: int) -> None:
        """Clear collected satellites and expect ``expected_messages`` sentences."""
        self._satellites.clear()
        self._expected_messages = expected_messages

    def add_message(
        self,
        total_messages: int,
        message_index: int,
        satellites_in_view: int | None,
        satellites: dict[int, SatelliteInfo],
    ) -> None:
        """Record one sentence of the sequence and upsert its satellites.

        Message 1 starts a new sequence. Any other message must carry the
        same message count and follow the previous index, otherwise the
        sequence is marked as not started.
        """
        if message_index == 1:
            self.start_sequence(total_messages)
        elif (
            total_messages != self._expected_messages
            or message_index != self._last_message_index + 1
        ):
            if self._expected_messages:
                logger.debug(
                    "GSV sequence broken: got message %d/%d after %d/%d",
                    message_index,
                    total_messages,
                    self._last_message_index,
                    self._expected_messages,
                )
            self._expected_messages = 0

        self._last_message_index = message_index
        self._satellites_in_view = satellites_in_view
        self._satellites.update(satellites)


def _parse_header_count(value: str, field: str) -> int:
    count = parse_int_field(value)
    if count is None or count < 1:
        raise SemanticError(
            f"Invalid {field.replace('_', ' ')} in GSV frame",
            field=field,
            value=value,
            constraint="positive integer",
        )
    return count


def _parse_satellite_field(value: str) -> float:
    parsed = parse_float_field(value)
    return NOT_AVAILABLE if parsed is None else parsed


def _extract_satellites(tokens: list[str]) -> dict[int, SatelliteInfo]:
    """Read the (PRN, elevation, azimuth, SNR) blocks of one sentence.

    Blocks start at tokens[4] and are read four fields at a time; a trailing
    incomplete block is ignored. A block whose PRN is empty, unreadable or
    not positive is dropped. Any other unreadable field becomes
    NOT_AVAILABLE.
    """
    satellites: dict[int, SatelliteInfo] = {}
    last_start = len(tokens) - _FIELDS_PER_SATELLITE
    for i in range(_FIRST_SATELLITE_INDEX, last_start + 1, _FIELDS_PER_SATELLITE):
        prn = parse_int_field(tokens[i])
        if prn is None or prn <= 0:
            logger.debug("Dropping GSV satellite with invalid PRN %r", tokens[i])
            continue

        satellites[prn] = SatelliteInfo(
            elevation_degrees=_parse_satellite_field(tokens[i + 1]),
            azimuth_degrees=_parse_satellite_field(tokens[i + 2]),
            snr_dbhz=_parse_satellite_field(tokens[i + 3]),
        )
    return satellites


def _accumulate(tokens: list[str], data: GNSSData, session: GSVSession) -> None:
    total_messages = _parse_header_count(tokens[1], "message_count")
    message_index = _parse_header_count(tokens[2], "message_index")
    if message_index > total_messages:
        raise SemanticError(
            f"GSV message index {message_index} exceeds message count {total_messages}",
            field="message_index",
            value=tokens[2],
            constraint=f"1 <= index <= {total_messages}",
        )

    session.add_message(
        total_messages,
        message_index,
        parse_int_field(tokens[3]),
        _extract_satellites(tokens),
    )

    if session.complete:
        data.satellites = dict(session.satellites)
        logger.debug("Published %d satellites from GSV sequence", len(data.satellites))


def parse_gsv(tokens: list[str], data: GNSSData, session: GSVSession) -> None:
    """Parse the fields of a GSV sentence into ``session``.

    The satellites are published into ``data.satellites`` (replacing its
    contents) when the final message of an unbroken sequence started in
    this session is parsed. Until then ``data`` is left untouched.

    Args:
        tokens: Comma-separated fields of the sentence, as returned by
            ``tokenize``. tokens[0] is the "$GPGSV" code.
        data: Record that receives the satellites of a completed sequence.
        session: Accumulation state shared by the sentences of a sequence.

    Raises:
        StructuralError: If there are fewer than 4 fields.
        SemanticError: If the message count or index is not a positive
            integer, or the index exceeds the count. Invalid satellite
            blocks are dropped without raising.
    """
    try:
        if len(tokens) < _MINIMUM_FIELD_COUNT:
            raise StructuralError("GSV", _MINIMUM_FIELD_COUNT, len(tokens))
        _accumulate(tokens, data, session)
    except NMEAError as error:
        logger.warning("[parse_gsv] %s", error)
        raise
