from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Iterable, List

from ..errors import InvalidSourceError
from ..types import CitationMarker, Source

# Wire key -> snake_case alias accepted for the same field.
_SOURCE_KEYS = {
    "citationNumber": "citation_number",
    "citationMarkers": "citation_markers",
}
_MARKER_KEYS = {"endOffset": "end_offset"}


def validate_required_fields(record: Mapping, fields: Iterable[str]) -> List[str]:
    return [field for field in fields if record.get(field) is None]


def assert_required_fields(record: Mapping, fields: Iterable[str]) -> None:
    missing = validate_required_fields(record, fields)
    if missing:
        raise InvalidSourceError(f"Missing required fields: {', '.join(missing)}")


def _normalize_keys(record: Mapping, aliases: Mapping[str, str]) -> dict:
    normalized = dict(record)
    for wire_key, alias in aliases.items():
        if normalized.get(wire_key) is None and alias in normalized:
            normalized[wire_key] = normalized[alias]
    return normalized


def _marker_from_record(record: Any) -> CitationMarker:
    if isinstance(record, CitationMarker):
        return record
    if not isinstance(record, Mapping):
        raise InvalidSourceError(f"Citation marker must be a mapping, got {type(record).__name__}")
    data = _normalize_keys(record, _MARKER_KEYS)
    assert_required_fields(data, ["endOffset"])
    return CitationMarker(end_offset=data["endOffset"])


def _check_marker_list(markers: Any) -> None:
    if isinstance(markers, (str, bytes, Mapping)) or not isinstance(markers, Sequence):
        raise InvalidSourceError(
            f"citationMarkers must be a list of markers, got {type(markers).__name__}"
        )


def source_from_record(record: Any) -> Source:
    """
    Build a ``Source`` from an upstream record (camelCase or snake_case keys).

    ``Source`` objects are rebuilt so mapping markers are coerced; the
    caller's object is left untouched.
    """
    if isinstance(record, Source):
        _check_marker_list(record.citation_markers)
        return Source(
            citation_number=record.citation_number,
            citation_markers=[_marker_from_record(marker) for marker in record.citation_markers],
        )
    if not isinstance(record, Mapping):
        raise InvalidSourceError(f"Source must be a mapping, got {type(record).__name__}")

    data = _normalize_keys(record, _SOURCE_KEYS)
    assert_required_fields(data, ["citationNumber", "citationMarkers"])
    markers = data["citationMarkers"]
    _check_marker_list(markers)
    return Source(
        citation_number=data["citationNumber"],
        citation_markers=[_marker_from_record(marker) for marker in markers],
    )


def sources_from_records(records: Any) -> List[Source]:
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise InvalidSourceError(
            f"sources must be a list of source records, got {type(records).__name__}"
        )
    return [source_from_record(record) for record in records]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_sources(text: str, sources: Iterable[Source]) -> None:
    """
    Reject citation numbers that are not positive ints and offsets outside
    ``[0, len(text)]``. An offset equal to ``len(text)`` cites the very end.
    """
    if not isinstance(text, str):
        raise InvalidSourceError(f"text must be a string, got {type(text).__name__}")

    for source in sources:
        number = source.citation_number
        if not _is_int(number) or number < 1:
            raise InvalidSourceError(f"citationNumber must be a positive integer, got {number!r}")
        _check_marker_list(source.citation_markers)
        for marker in source.citation_markers:
            if not isinstance(marker, CitationMarker):
                raise InvalidSourceError(
                    f"Citation {number}: marker must be a CitationMarker, got {type(marker).__name__}"
                )
            offset = marker.end_offset
            if not _is_int(offset):
                raise InvalidSourceError(
                    f"Citation {number}: endOffset must be an integer, got {offset!r}"
                )
            if offset < 0 or offset > len(text):
                raise InvalidSourceError(
                    f"Citation {number}: endOffset {offset} outside text of length {len(text)}"
                )
