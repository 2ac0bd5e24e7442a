import logging

from flask import current_app, jsonify, request

from ideai.errors import InternalError, ValidationError

logger = logging.getLogger(__name__)


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data


def user_store():
    return current_app.extensions['ideai']['users']


def project_store():
    return current_app.extensions['ideai']['projects']


def error_response(error):
    return jsonify({'success': False, 'message': error.message}), error.status_code


def internal_error(action):
    logger.exception("%s error", action)
    return error_response(InternalError())
