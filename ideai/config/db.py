import json
import logging
import os
import tempfile
import threading
from copy import deepcopy

from ideai.config.settings import load_settings

logger = logging.getLogger(__name__)


class JsonFileCollection:
    """A collection mirrored 1:1 with a JSON array on disk.

    Reads never raise: a missing or malformed file is an empty collection.
    Writes replace the whole file and let I/O errors propagate.
    """

    def __init__(self, path):
        self.path = path
        self.lock = threading.RLock()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating as empty: %s", self.path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Expected a JSON array in %s, treating as empty", self.path)
            return []
        return data

    def save(self, records):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        # Readers only ever see the old file or the complete new one
        temp_path = None
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=parent or '.', suffix='.tmp',
                                             delete=False) as f:
                temp_path = f.name
                json.dump(records, f, indent=2, ensure_ascii=False, allow_nan=False)
            os.replace(temp_path, self.path)
        except BaseException:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def __repr__(self):
        return f"JsonFileCollection({self.path!r})"


class MemoryCollection:
    """Same port as JsonFileCollection, kept in process memory."""

    def __init__(self, records=None):
        self._records = deepcopy(list(records or []))
        self.lock = threading.RLock()

    def load(self):
        return deepcopy(self._records)

    def save(self, records):
        self._records = deepcopy(list(records))


class Database:
    def __init__(self, users, projects):
        self.users = users
        self.projects = projects


def connect_db(settings=None):
    settings = settings or load_settings()
    users_path = os.path.join(settings.data_dir, settings.users_file)
    projects_path = os.path.join(settings.data_dir, settings.projects_file)
    logger.info("Using user store %s and project store %s", users_path, projects_path)
    return Database(JsonFileCollection(users_path), JsonFileCollection(projects_path))


def memory_db(users=None, projects=None):
    return Database(MemoryCollection(users), MemoryCollection(projects))


def load_demo_projects(path):
    with open(path, 'r', encoding='utf-8') as f:
        demo = json.load(f)
    if not isinstance(demo, list):
        raise ValueError(f"Demo project file {path} must contain a JSON array")
    return tuple(demo)
