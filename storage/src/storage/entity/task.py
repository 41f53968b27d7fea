from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from .base import Base, BaseEntity
from .category import CategoryEntity


class TaskEntity(Base, BaseEntity):
    __tablename__ = "task"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    task_id = Column(String, nullable=False)
    title = Column(String(500), nullable=False)
    memo = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="PENDING")
    priority = Column(String, nullable=True)
    # Calendar date (YYYY-MM-DD) in the configured timezone, not an instant.
    scheduled_at = Column(String(10), nullable=True)
    # UTC ISO 8601 instants.
    completed_at = Column(String, nullable=True)
    skipped_at = Column(String, nullable=True)
    skip_reason = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey('category.id', ondelete='SET NULL'), nullable=True, index=True)
    display_order = Column(Integer, nullable=True)

    category = relationship(CategoryEntity, lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "task_id"),
        Index("ix_task_user_status_scheduled", "user_id", "status", "scheduled_at"),
    )
