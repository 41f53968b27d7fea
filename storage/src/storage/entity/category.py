from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from .base import Base, BaseEntity


class CategoryEntity(Base, BaseEntity):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    category_id = Column(String, nullable=False)
    name = Column(String(100), nullable=False)
    color = Column(String, nullable=True)

    __table_args__ = (
        UniqueConstraint("user_id", "category_id"),
    )
