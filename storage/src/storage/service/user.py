"""User and account service."""

import os
import secrets
from typing import Dict, Optional

from loguru import logger

from storage.constants import ERROR_MESSAGES
from storage.entity.dto import User
from storage.repository import user as user_repo
from storage.service.result import NotFound, ValidationFailed, action
from storage.service.validation import ChangeEmailInput

DEFAULT_CLI_USER = "local@yarukoto"


def get_or_create_user(email: str, name: Optional[str] = None) -> User:
    user = user_repo.get_user_by_email(email)
    if user:
        return user
    user = user_repo.create_user(email, name=name)
    logger.info("Created user id={} email={}", user.id, user.email)
    return user


def get_user(user_id: int) -> Optional[User]:
    return user_repo.get_user(user_id)


def get_cli_user_id() -> int:
    """Owner for CLI commands: the YARUKOTO_USER account, created on first use."""
    email = os.getenv("YARUKOTO_USER", DEFAULT_CLI_USER)
    return get_or_create_user(email).id


def issue_token(user_id: int) -> str:
    token = secrets.token_urlsafe(32)
    user_repo.create_session(user_id, token)
    return token


def resolve_token(token: str) -> Optional[int]:
    return user_repo.get_user_id_by_token(token)


@action(ERROR_MESSAGES["EMAIL_CHANGE_FAILED"])
def change_email(user_id: int, email: str) -> User:
    email = ChangeEmailInput(email=email).email
    existing = user_repo.get_user_by_email(email)
    if existing and existing.id != user_id:
        raise ValidationFailed("This email address is already in use")
    if not user_repo.update_email(user_id, email):
        raise NotFound(ERROR_MESSAGES["ACCOUNT_NOT_FOUND"])
    return user_repo.get_user(user_id)


@action(ERROR_MESSAGES["ACCOUNT_DELETE_FAILED"])
def delete_account(user_id: int) -> Dict[str, int]:
    """Remove the user with every task, category and session they own."""
    if not user_repo.delete_user_cascade(user_id):
        raise NotFound(ERROR_MESSAGES["ACCOUNT_NOT_FOUND"])
    logger.info("Deleted account user_id={}", user_id)
    return {"user_id": user_id}
