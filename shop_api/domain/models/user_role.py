# shop_api/domain/models/user_role.py

from enum import Enum
from typing import List


class UserRole(str, Enum):
    """Closed set of roles a user can be registered with."""

    ADMIN = "admin"
    USER = "user"
    MANAGER = "manager"

    @classmethod
    def values(cls) -> List[str]:
        return [role.value for role in cls]
