"""
Business logic services for the nonprofit directory.

Services read the record collection and own the browsing state built on top of it.
"""

from .record_store import RecordStore, RecordStoreError, SupabaseRecordStore, JsonFileStore
from .state import DirectoryState
from .controller import DirectoryView, FilterStateController, LoadState

__all__ = [
    "RecordStore",
    "RecordStoreError",
    "SupabaseRecordStore",
    "JsonFileStore",
    "DirectoryState",
    "DirectoryView",
    "FilterStateController",
    "LoadState",
]
