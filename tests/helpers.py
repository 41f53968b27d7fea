# tests/helpers.py

from __future__ import annotations


def ok(result):
    """Unwrap a successful ActionResult, failing the test with its error otherwise."""
    assert result.success, f"{result.code}: {result.error}"
    return result.data


def ids(tasks) -> list[str]:
    return [t.task_id for t in tasks]
