from flask import Blueprint, current_app, jsonify, request

from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_key_event, log_error_event

table_api = Blueprint('table', __name__)


def _table():
    return current_app.config['TABLE']


def _lock():
    # HashTable has no internal locking; every call goes through this one lock
    return current_app.config['TABLE_LOCK']


@table_api.route('/<int(signed=True):key>', methods=['GET'])
def get_value(key):
    with _lock():
        value = _table().search(key)

    if value is None:
        log_key_event(LogEvent.KEY_NOT_FOUND, key)
        return jsonify({"error": "Key not found"}), 404

    log_key_event(LogEvent.KEY_FOUND, key)
    return jsonify({"key": key, "value": value})


@table_api.route('/<int(signed=True):key>', methods=['PUT'])
def put_value(key):
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or 'value' not in data:
        log_error_event(LogEvent.INVALID_REQUEST, f"missing value for key {key}")
        return jsonify({"error": "value is required"}), 400

    value = data['value']
    if not isinstance(value, str):
        log_error_event(LogEvent.INVALID_REQUEST, f"non-string value for key {key}")
        return jsonify({"error": "value must be a string"}), 400

    with _lock():
        table = _table()
        existed = table.contains_key(key)
        table.put(key, value)

    if existed:
        log_key_event(LogEvent.KEY_UPDATED, key)
        return jsonify({"key": key, "value": value}), 200

    log_key_event(LogEvent.KEY_STORED, key)
    return jsonify({"key": key, "value": value}), 201


@table_api.route('/<int(signed=True):key>', methods=['DELETE'])
def delete_value(key):
    with _lock():
        value = _table().remove(key)

    if value is None:
        log_key_event(LogEvent.KEY_NOT_FOUND, key)
        return jsonify({"error": "Key not found"}), 404

    log_key_event(LogEvent.KEY_REMOVED, key)
    return jsonify({"key": key, "value": value})


@table_api.route('/', methods=['GET'])
def table_stats():
    with _lock():
        table = _table()
        stats = {
            "size": table.size(),
            "capacity": table.capacity(),
            "load_factor": table.load_factor(),
            "empty": table.empty()
        }
    return jsonify(stats)


@table_api.route('/keys', methods=['GET'])
def list_keys():
    with _lock():
        keys = sorted(_table().keys())
    return jsonify({"keys": keys})


@table_api.route('/values', methods=['GET'])
def list_values():
    with _lock():
        values = _table().values()
    return jsonify({"values": values})
