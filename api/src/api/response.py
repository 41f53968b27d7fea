import json
from typing import Any

from fastapi.responses import JSONResponse

from storage.service.result import ActionResult, VALIDATION_ERROR, NOT_FOUND

_STATUS_BY_CODE = {
    VALIDATION_ERROR: 400,
    NOT_FOUND: 404,
}


class UnicodeJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False).encode("utf-8")


def respond(result: ActionResult):
    """Success payload as-is; failures as {success, error, code} with a matching status."""
    body = result.to_dict()
    if result.success:
        return body["data"]
    return UnicodeJSONResponse(status_code=_STATUS_BY_CODE.get(result.code, 500), content=body)
