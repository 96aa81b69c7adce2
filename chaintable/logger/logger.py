from chaintable.logger.log_types import LogEvent
import json
import logging

# Same logger that config.LOGGING routes to logz.io
logger = logging.getLogger('chaintable_logger')


def log_table_event(event: LogEvent, capacity: int, size: int):
    """Log a table-level event (creation, growth)"""
    logger.info(json.dumps({
        "event": event,
        "capacity": capacity,
        "size": size
    }))


def log_key_event(event: LogEvent, key: int):
    """Log a key-level event"""
    logger.info(json.dumps({
        "event": event,
        "key": key
    }))


def log_error_event(event: LogEvent, error: str):
    """Log an error event"""
    logger.error(json.dumps({
        "event": event,
        "error": error
    }))


def log_load_event(event: LogEvent, path: str, lines: int, skipped: int = 0):
    """Log a bulk load from a file (with optional skipped-line count)"""
    log_data = {
        "event": event,
        "path": path,
        "lines": lines
    }
    if skipped:
        log_data["skipped"] = skipped

    logger.info(json.dumps(log_data))
