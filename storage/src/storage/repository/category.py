"""Function-based category repository using SQLAlchemy sessions."""

from typing import List, Optional
from storage.entity.category import CategoryEntity
from storage.entity.task import TaskEntity
from storage.entity.dto import Category
from storage.database.base import get_db


def _entity_to_dto(entity: CategoryEntity) -> Category:
    return Category(
        category_id=entity.category_id,
        name=entity.name,
        color=entity.color,
        created_at=entity.created_at if entity.created_at else None,
        updated_at=entity.updated_at if entity.updated_at else None,
    )


def list_categories(user_id: int) -> List[Category]:
    with get_db() as session:
        rows = (
            session.query(CategoryEntity)
            .filter_by(user_id=user_id)
            .order_by(CategoryEntity.created_at.asc(), CategoryEntity.id.asc())
            .all()
        )
        return [_entity_to_dto(r) for r in rows]


def get_category(user_id: int, category_id: str) -> Optional[Category]:
    with get_db() as session:
        row = session.query(CategoryEntity).filter_by(user_id=user_id, category_id=category_id).first()
        if row:
            return _entity_to_dto(row)
        return None


def get_category_pk(user_id: int, category_id: str) -> Optional[int]:
    with get_db() as session:
        row = session.query(CategoryEntity.id).filter_by(user_id=user_id, category_id=category_id).first()
        return row.id if row else None


def save_category(user_id: int, category: Category) -> Category:
    with get_db() as session:
        entity = session.query(CategoryEntity).filter_by(user_id=user_id, category_id=category.category_id).first()
        fields = dict(name=category.name, color=category.color)
        if entity:
            for k, v in fields.items():
                setattr(entity, k, v)
        else:
            entity = CategoryEntity(user_id=user_id, category_id=category.category_id, **fields)
            session.add(entity)
        session.flush()
        return _entity_to_dto(entity)


def delete_category(user_id: int, category_id: str) -> bool:
    """Detach the category from its tasks, then delete it. One transaction."""
    with get_db() as session:
        entity = session.query(CategoryEntity).filter_by(user_id=user_id, category_id=category_id).first()
        if not entity:
            return False
        (
            session.query(TaskEntity)
            .filter_by(user_id=user_id, category_id=entity.id)
            .update({TaskEntity.category_id: None}, synchronize_session=False)
        )
        session.delete(entity)
        session.flush()
        return True
