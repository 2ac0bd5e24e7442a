from flask import Blueprint, jsonify

from ideai.errors import StoreError
from ideai.routes.common import error_response, internal_error, json_body, user_store

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/signup', methods=['POST'])
def signup():
    try:
        data = json_body()
        user = user_store().create(
            data.get('firstname'),
            data.get('lastname'),
            data.get('username'),
            data.get('email'),
            data.get('password'),
            data.get('userType'),
        )
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Signup")
    return jsonify({'success': True, 'message': 'User created successfully!', 'user': user}), 200


@auth_bp.route('/login', methods=['POST'])
def login():
    try:
        body = json_body()
        identifier = body.get('usernameOrEmail') or body.get('username') or body.get('email')
        user = user_store().authenticate(identifier, body.get('password'))
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Login")
    return jsonify({'success': True, 'message': 'Login successful!', 'user': user}), 200
