import os

from dotenv import load_dotenv

DEFAULT_DEMO_PROJECTS_FILE = os.path.join(os.path.dirname(__file__), '..', 'data', 'demo_projects.json')


class Settings:
    def __init__(self, port=5000, data_dir='.', users_file='users.json', projects_file='projects.json',
                 demo_projects_file=DEFAULT_DEMO_PROJECTS_FILE, bcrypt_rounds=12, log_level='INFO', debug=False):
        self.port = port
        self.data_dir = data_dir
        self.users_file = users_file
        self.projects_file = projects_file
        self.demo_projects_file = demo_projects_file
        self.bcrypt_rounds = bcrypt_rounds
        self.log_level = log_level
        self.debug = debug


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings():
    # Load variables from .env into the environment
    load_dotenv()
    try:
        port = int(os.environ.get("PORT", 5000))
        rounds = int(os.environ.get("BCRYPT_ROUNDS", 12))
    except ValueError as e:
        raise ValueError(f"PORT and BCRYPT_ROUNDS must be integers: {e}")
    return Settings(
        port=port,
        data_dir=os.environ.get("DATA_DIR", "."),
        users_file=os.environ.get("USERS_FILE", "users.json"),
        projects_file=os.environ.get("PROJECTS_FILE", "projects.json"),
        demo_projects_file=os.environ.get("DEMO_PROJECTS_FILE", DEFAULT_DEMO_PROJECTS_FILE),
        bcrypt_rounds=rounds,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        debug=_env_flag("FLASK_DEBUG"),
    )
