import itertools

from ideai.config.db import memory_db
from ideai.security import PasswordHasher
from ideai.stores import ProjectStore, UserStore

DEMO_PROJECTS = (
    {"id": "demo-1", "title": "GreenCharge", "badge": "Trending", "tags": ["cleantech"]},
    {"id": "demo-2", "title": "MediTrack", "badge": "New", "tags": ["healthtech"]},
)

# bcrypt's minimum work factor keeps the suite fast
FAST_HASHER = PasswordHasher(rounds=4)


def counter_ids(start=1000):
    counter = itertools.count(start)
    return lambda: str(next(counter))


def ticking_clock(day=1):
    days = itertools.count(day)
    return lambda: f"2024-01-{next(days):02d}T10:00:00.000Z"


def build_stores(db=None, demo_projects=DEMO_PROJECTS):
    db = db or memory_db()
    projects = ProjectStore(db.projects, users=db.users, demo_projects=demo_projects,
                            id_factory=counter_ids(5000), clock=ticking_clock())
    users = UserStore(db.users, projects, hasher=FAST_HASHER,
                      id_factory=counter_ids(1000), clock=ticking_clock())
    return db, users, projects


def signup(users, username="ada", email=None, password="secret1", user_type="entrepreneur"):
    return users.create("Ada", "L", username, email or f"{username}@x.com", password, user_type)
