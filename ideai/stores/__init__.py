from ideai.stores.projects import ProjectStore
from ideai.stores.users import UserStore

__all__ = ["ProjectStore", "UserStore"]
