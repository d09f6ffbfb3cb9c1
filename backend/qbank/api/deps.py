"""
Shared dependencies: raw JSON request body.
Bodies are validated by services.validation (400 with field errors), not by FastAPI's 422 path.
"""
import json
import logging
from typing import Any

from fastapi import HTTPException, Request, status

from qbank.services.validation import Invalid

logger = logging.getLogger(__name__)

INVALID_JSON_MSG = "Invalid JSON"
INVALID_DATA_MSG = "Invalid data"


async def json_body(request: Request) -> Any:
    """Parse the request body as JSON or fail with 400 before any storage access (malformed or too deeply nested)."""
    raw = await request.body()
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug("Rejected unparsable body on %s %s", request.method, request.url.path)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_JSON_MSG)


def invalid_data(result: Invalid) -> HTTPException:
    """400 carrying field-level errors from a failed validate_* call."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": INVALID_DATA_MSG, "errors": result.field_errors},
    )
