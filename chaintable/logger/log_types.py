from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_RESIZED = "table_resized"
    KEY_STORED = "key_stored"
    KEY_UPDATED = "key_updated"
    KEY_FOUND = "key_found"
    KEY_NOT_FOUND = "key_not_found"
    KEY_REMOVED = "key_removed"
    INVALID_REQUEST = "invalid_request"
    FILE_LOADED = "file_loaded"


class TableLog(Dict):
    event: LogEvent
    capacity: int
    size: int


class KeyLog(Dict):
    event: LogEvent
    key: int


class ErrorLog(Dict):
    event: LogEvent
    error: str


class LoadLog(Dict):
    event: LogEvent
    path: str
    lines: int
    skipped: int
