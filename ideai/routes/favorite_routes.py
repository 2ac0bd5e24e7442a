from flask import Blueprint, jsonify, request

from ideai.errors import StoreError
from ideai.routes.common import error_response, internal_error, json_body, user_store

favorite_bp = Blueprint('favorites', __name__)


@favorite_bp.route('/favorites', methods=['POST'])
def add_favorite():
    try:
        data = json_body()
        favorites = user_store().add_favorite(data.get('username'), data.get('projectId'))
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Add favorite")
    return jsonify({'success': True, 'message': 'Added to favorites!', 'favorites': favorites}), 200


@favorite_bp.route('/favorites/<project_id>', methods=['DELETE'])
def remove_favorite(project_id):
    try:
        favorites = user_store().remove_favorite(request.args.get('username'), project_id)
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Remove favorite")
    return jsonify({'success': True, 'message': 'Removed from favorites.', 'favorites': favorites}), 200


@favorite_bp.route('/favorites/<username>', methods=['GET'])
def list_favorites(username):
    try:
        favorites = user_store().list_favorites(username)
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Get favorites")
    return jsonify({'success': True, 'favorites': favorites}), 200
