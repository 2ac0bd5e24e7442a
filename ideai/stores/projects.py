import logging
import math

from ideai.errors import Forbidden, NotFound, ValidationError
from ideai.models.common import new_id, newest_first, utc_now_iso
from ideai.models.project import project_doc

logger = logging.getLogger(__name__)


def _parse_funding(funding):
    if funding is None or funding == "":
        return 0
    if isinstance(funding, bool):
        raise ValidationError("Funding must be a number.")
    if isinstance(funding, int):
        value = funding
    else:
        try:
            value = float(funding)
        except (TypeError, ValueError):
            raise ValidationError("Funding must be a number.")
        # inf and nan have no JSON representation
        if not math.isfinite(value):
            raise ValidationError("Funding must be a number.")
        if value.is_integer() and not isinstance(funding, float):
            value = int(value)
    if value < 0:
        raise ValidationError("Funding cannot be negative.")
    return value


def _parse_flag(flag):
    if flag is None:
        return False
    if not isinstance(flag, bool):
        raise ValidationError("lookingForInvestment must be true or false.")
    return flag


class ProjectStore:
    """Project collection plus the read-only demo projects used by favorites."""

    def __init__(self, collection, users=None, demo_projects=(), id_factory=new_id, clock=utc_now_iso):
        self.collection = collection
        self.users = users
        self.demo_projects = tuple(demo_projects)
        self.id_factory = id_factory
        self.clock = clock

    def create(self, title, description, username, category=None, funding=None, looking_for_investment=False):
        if not title or not description or not username:
            raise ValidationError("Title, description and username are required.")
        if not all(isinstance(f, str) for f in (title, description, username)):
            raise ValidationError("Title, description and username must be text.")
        if category is not None and not isinstance(category, str):
            raise ValidationError("Category must be text.")
        funding = _parse_funding(funding)
        looking_for_investment = _parse_flag(looking_for_investment)
        if self.users is not None and not any(u.get('username') == username for u in self.users.load()):
            raise NotFound("User not found.")

        with self.collection.lock:
            projects = self.collection.load()
            project = project_doc(
                self.id_factory(), title, description, username, self.clock(),
                category=category, funding=funding, looking_for_investment=looking_for_investment,
            )
            projects.append(project)
            self.collection.save(projects)
        logger.info("Project %s created by %s", project['id'], username)
        return project

    def list(self, category=None, status=None, creator=None):
        projects = self.collection.load()
        if category:
            projects = [p for p in projects if p.get('category') == category]
        if status:
            projects = [p for p in projects if p.get('status') == status]
        if creator:
            projects = [p for p in projects if p.get('creator') == creator]
        return newest_first(projects)

    def get(self, project_id):
        for project in self.collection.load():
            if project.get('id') == project_id:
                return project
        raise NotFound("Project not found.")

    def like(self, project_id):
        with self.collection.lock:
            projects = self.collection.load()
            project = next((p for p in projects if p.get('id') == project_id), None)
            if project is None:
                raise NotFound("Project not found.")
            project['likes'] = project.get('likes', 0) + 1
            self.collection.save(projects)
            return project['likes']

    def delete(self, project_id, username):
        if not username:
            raise ValidationError("Username is required.")
        with self.collection.lock:
            projects = self.collection.load()
            project = next((p for p in projects if p.get('id') == project_id), None)
            if project is None:
                raise NotFound("Project not found.")
            if project.get('creator') != username:
                logger.info("User %s may not delete project %s", username, project_id)
                raise Forbidden("Only the project creator can delete this project.")
            projects.remove(project)
            self.collection.save(projects)
        logger.info("Project %s deleted by %s", project_id, username)

    def all_with_demo(self):
        return self.collection.load() + [dict(d) for d in self.demo_projects]

    def resolve(self, project_id):
        for project in self.all_with_demo():
            if project.get('id') == project_id:
                return project
        return None

    def resolve_many(self, project_ids):
        wanted = set(project_ids)
        return [p for p in self.all_with_demo() if p.get('id') in wanted]
