"""
Request dependencies shared by the employee endpoints.

FastAPI resolves dependencies in declaration order and stops at the
first ``HTTPException``, so handlers list them in the order the checks
must run: path identifier, content type, then payload.  Doing the
parsing here rather than through typed path/body parameters keeps the
error statuses at 400/415 instead of FastAPI's default 422.
"""

import logging
from typing import Awaitable, Callable, Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from employee_api.app.services.employee_service import EmployeeStore
from employee_api.app.services.pagination import parse_int

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_MEDIA_TYPE = "application/json"


def get_store(request: Request) -> EmployeeStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def parse_employee_id(employee_id: str) -> int:
    """Parse the ``{employee_id}`` path segment as an integer.

    Raises HTTP 400 if the segment is not a base-10 integer.
    """
    value = parse_int(employee_id)
    if value is None:
        logger.warning("Error: Invalid employee ID: %s", employee_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid employee ID")
    return value


def require_json_content(request: Request) -> None:
    """Reject requests whose ``Content-Type`` is not JSON with HTTP 415.

    Parameters such as ``charset`` are allowed; the media type itself is
    compared case-insensitively.
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        logger.warning(
            "Error: Invalid content-type. Expected 'application/json', got '%s'",
            content_type,
        )
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Invalid content-type. Expected 'application/json'",
        )


def json_payload(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that decodes the request body into ``model``.

    The body is decoded as JSON regardless of the ``Content-Type``
    header; combine with ``require_json_content`` where the header must
    be enforced.  A body that is not valid JSON or does not fit the
    model results in HTTP 400 carrying the decoder's error text.

    Parameters
    ----------
    model : Type[BaseModel]
        Pydantic model class to validate the payload against.

    Returns
    -------
    Callable
        An async dependency suitable for ``Depends``.
    """

    async def dependency(request: Request) -> ModelT:
        body = await request.body()
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("Error: Invalid %s payload: %s", model.__name__, exc)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return dependency
