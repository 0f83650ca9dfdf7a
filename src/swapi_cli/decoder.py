"""Turn SWAPI JSON bodies into `CharacterRecord` objects."""
import json
import logging
from typing import Any, List

from .errors import DecodeError
from .models import CharacterRecord

LOG = logging.getLogger(__name__)

DECODE_FAILED = "An error occurred while deserializing the result received from the Star Wars API!"

# JSON keys copied onto the record; everything else in the payload is ignored
FIELDS = ("name", "birth_year", "height", "eye_color")


def _text(value: Any):
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _parse(body: str) -> Any:
    try:
        return json.loads(body)
    except (TypeError, ValueError) as ex:
        raise DecodeError(f"{DECODE_FAILED} ({ex})") from ex


def _record_from(data: Any) -> CharacterRecord:
    if not isinstance(data, dict):
        raise DecodeError(DECODE_FAILED)
    return CharacterRecord(**{key: _text(data.get(key)) for key in FIELDS})


def decode_one(body: str) -> CharacterRecord:
    """Decode a single character object.

    A `null` payload is an error, not an empty record.
    """
    return _record_from(_parse(body))


def decode_many(body: str) -> List[CharacterRecord]:
    """Decode the `results` array of a search response.

    Raises `DecodeError` when the array is missing or empty.
    """
    data = _parse(body)
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise DecodeError(DECODE_FAILED)

    records = [_record_from(item) for item in results]
    LOG.debug("Decoded %d character(s) from search results", len(records))
    if not records:
        raise DecodeError(DECODE_FAILED)
    return records
