"""Domain exceptions and the FastAPI handlers that turn them into responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_BODY_DETAIL = "Invalid request body"
_VALUE_ERROR_PREFIX = "Value error, "


class TaskNotFoundError(Exception):
    """Raised when a task ID is not present in the store."""

    def __init__(self, task_id: str, message: str = "Task not found"):
        self.task_id = task_id
        self.message = message
        super().__init__(self.message)


def first_validation_message(exc: RequestValidationError) -> str:
    """Pick the message reported for a rejected request body.

    Errors raised by our own validators carry a readable rule description.
    Anything else (broken JSON, wrong shape, wrong types) is a malformed body.
    """
    errors = exc.errors()
    if not errors:
        return INVALID_BODY_DETAIL
    first = errors[0]
    if first.get("type") != "value_error":
        return INVALID_BODY_DETAIL
    return str(first.get("msg", "")).removeprefix(_VALUE_ERROR_PREFIX) or INVALID_BODY_DETAIL


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = first_validation_message(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error taxonomy to an application."""
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
