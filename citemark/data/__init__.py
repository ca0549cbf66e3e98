"""Coercion and validation of citation source records."""

from .sources import (
    assert_required_fields,
    source_from_record,
    sources_from_records,
    validate_required_fields,
    validate_sources,
)

__all__ = [
    "assert_required_fields",
    "source_from_record",
    "sources_from_records",
    "validate_required_fields",
    "validate_sources",
]
