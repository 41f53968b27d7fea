"""Field limits and user-facing messages."""

TITLE_MAX_LENGTH = 500
MEMO_MAX_LENGTH = 10000
SKIP_REASON_MAX_LENGTH = 1000
CATEGORY_NAME_MAX_LENGTH = 100

ERROR_MESSAGES = {
    "TASK_FETCH_FAILED": "Failed to fetch tasks",
    "TASK_CREATE_FAILED": "Failed to create task",
    "TASK_UPDATE_FAILED": "Failed to update task",
    "TASK_DELETE_FAILED": "Failed to delete task",
    "TASK_COMPLETE_FAILED": "Failed to complete task",
    "TASK_NOT_FOUND": "Task not found",
    "TASK_STATS_FAILED": "Failed to fetch task statistics",
    "CATEGORY_FETCH_FAILED": "Failed to fetch categories",
    "CATEGORY_CREATE_FAILED": "Failed to create category",
    "CATEGORY_UPDATE_FAILED": "Failed to update category",
    "CATEGORY_DELETE_FAILED": "Failed to delete category",
    "CATEGORY_NOT_FOUND": "Category not found",
    "SEARCH_FAILED": "Search failed",
    "EMAIL_CHANGE_FAILED": "Failed to change email address",
    "ACCOUNT_DELETE_FAILED": "Failed to delete account",
    "ACCOUNT_NOT_FOUND": "Account not found",
    "VALIDATION_ERROR": "Invalid input",
}
