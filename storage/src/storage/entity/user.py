from sqlalchemy import Column, Integer, String, ForeignKey
from .base import Base, BaseEntity


class UserEntity(Base, BaseEntity):
    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=True)


class AuthSessionEntity(Base, BaseEntity):
    __tablename__ = "auth_session"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    token = Column(String, nullable=False, unique=True)
