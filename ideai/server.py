import logging

from flask import Flask, jsonify
from flask_cors import CORS

from ideai.config.db import connect_db, load_demo_projects
from ideai.config.settings import load_settings
from ideai.routes.auth_routes import auth_bp
from ideai.routes.favorite_routes import favorite_bp
from ideai.routes.project_routes import project_bp
from ideai.routes.user_routes import user_bp
from ideai.security import PasswordHasher
from ideai.stores import ProjectStore, UserStore

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')


def create_app(settings=None, db=None, demo_projects=None):
    settings = settings or load_settings()
    db = db or connect_db(settings)
    if demo_projects is None:
        demo_projects = load_demo_projects(settings.demo_projects_file)

    app = Flask(__name__)
    CORS(app)

    projects = ProjectStore(db.projects, users=db.users, demo_projects=demo_projects)
    users = UserStore(db.users, projects, hasher=PasswordHasher(settings.bcrypt_rounds))
    app.extensions['ideai'] = {'users': users, 'projects': projects}

    # Root endpoint
    @app.route('/')
    def home():
        return jsonify({'success': True, 'message': 'API is running'}), 200

    # Register blueprints
    for blueprint in (auth_bp, user_bp, project_bp, favorite_bp):
        app.register_blueprint(blueprint, url_prefix='/api')

    @app.errorhandler(404)
    def route_not_found(e):
        return jsonify({'success': False, 'message': 'Route not found.'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'message': 'Method not allowed.'}), 405

    @app.errorhandler(500)
    def server_error(e):
        logger.error("Unhandled error: %s", e)
        return jsonify({'success': False, 'message': 'Something went wrong!'}), 500

    return app


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("IDEAI server running on http://localhost:%s", settings.port)
    app.run(host='0.0.0.0', debug=settings.debug, port=settings.port)


if __name__ == '__main__':
    main()
