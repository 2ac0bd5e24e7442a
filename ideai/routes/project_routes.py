from flask import Blueprint, jsonify, request

from ideai.errors import StoreError
from ideai.routes.common import error_response, internal_error, json_body, project_store

project_bp = Blueprint('projects', __name__)


@project_bp.route('/projects', methods=['POST'])
def create_project():
    try:
        data = json_body()
        project = project_store().create(
            data.get('title'),
            data.get('description'),
            data.get('username'),
            category=data.get('category'),
            funding=data.get('funding'),
            looking_for_investment=data.get('lookingForInvestment', False),
        )
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Create project")
    return jsonify({'success': True, 'message': 'Project created successfully!', 'project': project}), 200


@project_bp.route('/projects', methods=['GET'])
def list_projects():
    try:
        projects = project_store().list(
            category=request.args.get('category'),
            status=request.args.get('status'),
            creator=request.args.get('creator'),
        )
    except Exception:
        return internal_error("Get projects")
    return jsonify({'success': True, 'projects': projects}), 200


@project_bp.route('/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    try:
        project = project_store().get(project_id)
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Get project")
    return jsonify({'success': True, 'project': project}), 200


@project_bp.route('/projects/<project_id>/like', methods=['POST'])
def like_project(project_id):
    try:
        likes = project_store().like(project_id)
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Like project")
    return jsonify({'success': True, 'message': 'Project liked!', 'likes': likes}), 200


@project_bp.route('/projects/<project_id>', methods=['DELETE'])
def delete_project(project_id):
    try:
        project_store().delete(project_id, request.args.get('username'))
    except StoreError as e:
        return error_response(e)
    except Exception:
        return internal_error("Delete project")
    return jsonify({'success': True, 'message': 'Project deleted successfully!'}), 200
