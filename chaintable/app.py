import logging
import logging.config
import sys
import threading

from flask import Flask, jsonify

from chaintable import config
from chaintable.api.v0.table_routes import table_api
from chaintable.hash_table import HashTable


def make_app(capacity=None, load_factor=None):
    app = Flask(__name__)

    logging.config.dictConfig(config.LOGGING)
    logger = logging.getLogger('chaintable_logger')

    capacity = capacity if capacity is not None else config.TABLE_CAPACITY
    load_factor = load_factor if load_factor is not None else config.TABLE_LOAD_FACTOR

    app.config['TABLE'] = HashTable(capacity, load_factor)
    app.config['TABLE_LOCK'] = threading.Lock()
    logger.info(f'Table initialized with capacity {capacity} and load factor {load_factor}')

    @app.route('/health', methods=['GET'])
    def health_check():
        return jsonify({"status": "ready"}), 200

    app.register_blueprint(table_api, url_prefix='/api/v0/table')

    return app


def run_app():
    app = make_app()

    logger = logging.getLogger('chaintable_logger')
    logger.info(f'Starting chaintable service on port {config.PORT}')

    app.run(
        host='0.0.0.0',
        port=config.PORT,
        debug=False,
        use_reloader=False,
        threaded=True
    )


if __name__ == '__main__':
    try:
        run_app()
    except KeyboardInterrupt:
        logging.info("Received keyboard interrupt")
    except Exception as e:
        logging.error(f"Application failed to start: {e}")
        sys.exit(1)
