import logging

from ideai.errors import Conflict, NotFound, Unauthorized, ValidationError
from ideai.models.common import new_id, newest_first, utc_now_iso
from ideai.models.user import (
    MIN_PASSWORD_LENGTH,
    USER_TYPES,
    is_valid_email,
    serialize_user,
    user_doc,
)
from ideai.security import PasswordHasher

logger = logging.getLogger(__name__)

LIST_PROFILE_FIELDS = ('skills', 'interests')


def _find(users, username):
    return next((u for u in users if u.get('username') == username), None)


class UserStore:
    """User collection: accounts, credentials, profiles and favorites.

    Every mutation is a read-modify-write of the whole collection held under
    the collection lock. Validation happens before anything is written.
    """

    def __init__(self, collection, projects, hasher=None, id_factory=new_id, clock=utc_now_iso):
        self.collection = collection
        self.projects = projects
        self.hasher = hasher or PasswordHasher()
        self.id_factory = id_factory
        self.clock = clock

    def create(self, firstname, lastname, username, email, password, user_type):
        fields = [firstname, lastname, username, email, password, user_type]
        if not all(fields):
            raise ValidationError("All fields are required.")
        if not all(isinstance(f, str) for f in fields):
            raise ValidationError("All fields must be text.")
        if not is_valid_email(email):
            raise ValidationError("Please enter a valid email address.")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
        if user_type not in USER_TYPES:
            raise ValidationError("User type must be either entrepreneur or investor.")

        with self.collection.lock:
            users = self.collection.load()
            if any(u.get('username') == username for u in users):
                raise Conflict("Username already exists.")
            if any(u.get('email') == email for u in users):
                raise Conflict("Email already exists.")
            user = user_doc(
                self.id_factory(), firstname, lastname, username, email,
                self.hasher.hash(password), user_type, self.clock(),
            )
            users.append(user)
            self.collection.save(users)
        logger.info("Registered user: %s", username)
        return serialize_user(user, include_profile=False)

    def authenticate(self, username_or_email, password):
        if not username_or_email or not password:
            raise ValidationError("All fields are required.")
        if not isinstance(password, str):
            raise ValidationError("Password must be text.")
        users = self.collection.load()
        user = next(
            (u for u in users if u.get('username') == username_or_email or u.get('email') == username_or_email),
            None,
        )
        if user is None:
            raise NotFound("User not found.")
        if not self.hasher.verify(password, user.get('password')):
            logger.info("Login failed for identifier: %s", username_or_email)
            raise Unauthorized("Incorrect password.")
        logger.info("Login successful for user: %s", user['username'])
        return serialize_user(user)

    def get(self, username):
        user = _find(self.collection.load(), username)
        if user is None:
            raise NotFound("User not found.")
        return serialize_user(user)

    def update_profile(self, username, profile):
        if profile is None:
            profile = {}
        if not isinstance(profile, dict):
            raise ValidationError("Profile must be an object.")
        for field in LIST_PROFILE_FIELDS:
            if field in profile:
                value = profile[field]
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ValidationError(f"Profile {field} must be a list of strings.")

        with self.collection.lock:
            users = self.collection.load()
            user = _find(users, username)
            if user is None:
                raise NotFound("User not found.")
            user['profile'] = {**(user.get('profile') or {}), **profile}
            self.collection.save(users)
        logger.info("Profile updated for %s", username)

    def list_all(self):
        return [serialize_user(u) for u in newest_first(self.collection.load())]

    def add_favorite(self, username, project_id):
        if not username or not project_id:
            raise ValidationError("Username and project id are required.")
        with self.collection.lock:
            users = self.collection.load()
            user = _find(users, username)
            if user is None:
                raise NotFound("User not found.")
            if self.projects.resolve(project_id) is None:
                raise NotFound("Project not found.")
            favorites = user.setdefault('favorites', [])
            if project_id in favorites:
                raise Conflict("Project is already in favorites.")
            favorites.append(project_id)
            self.collection.save(users)
        logger.info("User %s favorited project %s", username, project_id)
        return list(favorites)

    def remove_favorite(self, username, project_id):
        if not username:
            raise ValidationError("Username is required.")
        with self.collection.lock:
            users = self.collection.load()
            user = _find(users, username)
            if user is None:
                raise NotFound("User not found.")
            favorites = user.get('favorites')
            if not favorites or project_id not in favorites:
                raise NotFound("Project is not in favorites.")
            favorites.remove(project_id)
            self.collection.save(users)
        logger.info("User %s removed favorite %s", username, project_id)
        return list(favorites)

    def list_favorites(self, username):
        user = _find(self.collection.load(), username)
        if user is None:
            raise NotFound("User not found.")
        favorites = user.get('favorites') or []
        if not favorites:
            return []
        return self.projects.resolve_many(favorites)
