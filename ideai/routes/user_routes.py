from flask import Blueprint, jsonify

from ideai.errors import StoreError
from ideai.routes.common import error_response, internal_error, json_body, user_store

user_bp = Blueprint('users', __name__)


@user_bp.route('/user/<username>', methods=['GET'])
def get_user(username):
    try:
        user = user_store().get(username)
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Get user")
    return jsonify({'success': True, 'user': user}), 200


@user_bp.route('/user/<username>', methods=['PUT'])
def update_user(username):
    try:
        data = json_body()
        user_store().update_profile(username, data.get('profile'))
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Update profile")
    return jsonify({'success': True, 'message': 'Profile updated successfully!'}), 200


@user_bp.route('/users', methods=['GET'])
def list_users():
    try:
        users = user_store().list_all()
    except Exception:
        return internal_error("Get users")
    return jsonify({'success': True, 'users': users}), 200
