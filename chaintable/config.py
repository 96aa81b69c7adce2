import os

LOGZIO_API_KEY = os.getenv("logzIO_api_key")

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

if not LOGZIO_API_KEY and not IS_TESTING:
    raise RuntimeError("Missing environment variable: LOGZIO_API_KEY")

TABLE_CAPACITY = int(os.getenv("TABLE_CAPACITY", "16"))
TABLE_LOAD_FACTOR = float(os.getenv("TABLE_LOAD_FACTOR", "0.75"))
PORT = int(os.getenv("PORT", "5002"))

TABLE_LOGGER = 'chaintable_logger'

# werkzeug only reports errors
_QUIET_WERKZEUG = {
    'level': 'ERROR',
    'handlers': [],
    'propagate': False
}

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        TABLE_LOGGER: {
            'level': 'DEBUG',
            'handlers': ['null'],
            'propagate': False
        },
        'werkzeug': _QUIET_WERKZEUG
    }
}

# events are JSON already; logz.io gets the bare message
PRODUCTION_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'json_message': {
            'format': '%(message)s',
        }
    },
    'handlers': {
        'logzio': {
            'class': 'logzio.handler.LogzioHandler',
            'level': 'INFO',
            'formatter': 'json_message',
            'token': LOGZIO_API_KEY,
            'logzio_type': 'chaintable-events',
            'logs_drain_timeout': 5,
            'url': os.getenv("LOGZIO_LISTENER_URL", 'https://listener-eu.logz.io:8071'),
            'retries_no': 4,
            'retry_timeout': 2,
        }
    },
    'loggers': {
        TABLE_LOGGER: {
            'level': 'DEBUG',
            'handlers': ['logzio'],
            'propagate': False
        },
        'werkzeug': _QUIET_WERKZEUG
    }
}

LOGGING = TEST_LOGGING if IS_TESTING else PRODUCTION_LOGGING
