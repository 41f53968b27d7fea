"""Function-based user and auth-session repository using SQLAlchemy sessions."""

from typing import Optional
from storage.entity.user import UserEntity, AuthSessionEntity
from storage.entity.category import CategoryEntity
from storage.entity.task import TaskEntity
from storage.entity.dto import User
from storage.database.base import get_db


def _entity_to_dto(entity: UserEntity) -> User:
    return User(
        id=entity.id,
        email=entity.email,
        name=entity.name,
        created_at=entity.created_at if entity.created_at else None,
    )


def get_user(user_id: int) -> Optional[User]:
    with get_db() as session:
        row = session.query(UserEntity).filter_by(id=user_id).first()
        return _entity_to_dto(row) if row else None


def get_user_by_email(email: str) -> Optional[User]:
    with get_db() as session:
        row = session.query(UserEntity).filter_by(email=email).first()
        return _entity_to_dto(row) if row else None


def get_user_id_by_token(token: str) -> Optional[int]:
    with get_db() as session:
        row = session.query(AuthSessionEntity.user_id).filter_by(token=token).first()
        return row.user_id if row else None


def create_user(email: str, name: Optional[str] = None) -> User:
    with get_db() as session:
        entity = UserEntity(email=email, name=name)
        session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def create_session(user_id: int, token: str) -> None:
    with get_db() as session:
        session.add(AuthSessionEntity(user_id=user_id, token=token))
        session.flush()


def update_email(user_id: int, email: str) -> bool:
    with get_db() as session:
        count = session.query(UserEntity).filter_by(id=user_id).update({UserEntity.email: email})
        session.flush()
        return count > 0


def delete_user_cascade(user_id: int) -> bool:
    """Delete a user's tasks, categories and sessions, then the user, in one transaction."""
    with get_db() as session:
        user = session.query(UserEntity).filter_by(id=user_id).first()
        if not user:
            return False
        session.query(TaskEntity).filter_by(user_id=user_id).delete(synchronize_session=False)
        session.query(CategoryEntity).filter_by(user_id=user_id).delete(synchronize_session=False)
        session.query(AuthSessionEntity).filter_by(user_id=user_id).delete(synchronize_session=False)
        session.delete(user)
        session.flush()
        return True
