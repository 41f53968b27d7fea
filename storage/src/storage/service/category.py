"""Category service."""

from typing import Dict, List

from loguru import logger

from storage.constants import ERROR_MESSAGES
from storage.entity.dto import Category
from storage.repository import category as category_repo
from storage.service.result import NotFound, ValidationFailed, action
from storage.service.validation import CategoryIdInput, CreateCategoryInput, UpdateCategoryInput
from storage.util import generate_id


@action(ERROR_MESSAGES["CATEGORY_FETCH_FAILED"])
def get_categories(user_id: int) -> List[Category]:
    return category_repo.list_categories(user_id)


@action(ERROR_MESSAGES["CATEGORY_CREATE_FAILED"])
def create_category(user_id: int, name: str, color: str = None) -> Category:
    parsed = CreateCategoryInput(name=name, color=color)
    category = Category(category_id=generate_id(), name=parsed.name, color=parsed.color)
    return category_repo.save_category(user_id, category)


@action(ERROR_MESSAGES["CATEGORY_UPDATE_FAILED"])
def update_category(user_id: int, category_id: str, **fields) -> Category:
    parsed = UpdateCategoryInput(category_id=category_id, **fields)
    provided = parsed.provided_fields()
    if not provided:
        raise ValidationFailed("No fields to update")
    category = category_repo.get_category(user_id, parsed.category_id)
    if not category:
        raise NotFound(ERROR_MESSAGES["CATEGORY_NOT_FOUND"])
    for key in provided:
        setattr(category, key, getattr(parsed, key))
    return category_repo.save_category(user_id, category)


@action(ERROR_MESSAGES["CATEGORY_DELETE_FAILED"])
def delete_category(user_id: int, category_id: str) -> Dict[str, str]:
    """Delete a category. Its tasks are kept and become uncategorized."""
    category_id = CategoryIdInput(category_id=category_id).category_id
    if not category_repo.delete_category(user_id, category_id):
        raise NotFound(ERROR_MESSAGES["CATEGORY_NOT_FOUND"])
    logger.info("Deleted category user_id={} category_id={}", user_id, category_id)
    return {"category_id": category_id}
