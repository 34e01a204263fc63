"""
Record store package for the employee roster.

Re-exports the store contract, the text-file implementation, the codec and
the load/save result types so downstream code can import from `roster.store`.
"""

from roster.store.abstract import AbstractRecordStore, RecordStore
from roster.store.codec import (
    FIELD_PREFIXES,
    RECORD_SEPARATOR,
    RecordDecoder,
    decode_lines,
    encode_record,
    encode_records,
)
from roster.store.results import LoadResult, SaveResult, StoreErrorKind, StoreFailure
from roster.store.text_file import TextFileRecordStore

__all__ = [
    # Contracts
    "AbstractRecordStore",
    "RecordStore",
    # Implementation
    "TextFileRecordStore",
    # Codec
    "FIELD_PREFIXES",
    "RECORD_SEPARATOR",
    "RecordDecoder",
    "decode_lines",
    "encode_record",
    "encode_records",
    # Results
    "LoadResult",
    "SaveResult",
    "StoreErrorKind",
    "StoreFailure",
]
