from .base import Base, BaseEntity
from .user import UserEntity, AuthSessionEntity
from .category import CategoryEntity
from .task import TaskEntity

__all__ = [
    "Base",
    "BaseEntity",
    "UserEntity",
    "AuthSessionEntity",
    "CategoryEntity",
    "TaskEntity",
]
