import logging
from datetime import datetime, timezone
from functools import wraps

from flask import jsonify

logger = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    """Raised for request input that cannot be parsed."""


def utc_timestamp():
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def api_response(message, data=None, status=200):
    return jsonify({
        'success': True,
        'message': message,
        'data': data,
        'timestamp': utc_timestamp(),
    }), status


def error_response(message, error=None, status=500):
    body = {
        'success': False,
        'message': message,
        'timestamp': utc_timestamp(),
    }
    if error is not None:
        body['error'] = error
    return jsonify(body), status


def api_endpoint(failure_message):
    """Turn bad input into a 400 and any other failure into a logged 500."""
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except InvalidParameter as e:
                return error_response(str(e), status=400)
            except Exception:
                logger.exception(failure_message)
                return error_response(failure_message)
        return wrapper
    return decorator


def parse_id(value, label):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidParameter(f'Invalid {label} ID')


def parse_limit(value, default):
    if value is None:
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    return limit if limit > 0 else default
