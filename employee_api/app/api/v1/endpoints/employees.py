"""
Employee endpoints for API v1.

These routes expose CRUD operations over the in-memory employee store
plus a paginated listing.  Handlers are plain functions: FastAPI runs
them on its worker thread pool, where the store's reader/writer lock
lets concurrent reads proceed together while writes are exclusive.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from employee_api.app.api.v1.dependencies import (
    get_store,
    json_payload,
    parse_employee_id,
    require_json_content,
)
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeStore
from employee_api.app.services.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    parse_page_param,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_DETAIL = "Employee not found"


def _not_found(employee_id: int) -> HTTPException:
    logger.warning("Error: Employee not found (ID: %d)", employee_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


@router.post("", response_model=Employee)
def create_employee(
    employee_in: EmployeeCreate = Depends(json_payload(EmployeeCreate)),
    store: EmployeeStore = Depends(get_store),
) -> Employee:
    """Create a new employee.

    The store assigns the identifier; an ``id`` in the payload is
    ignored.  Returns HTTP 200 with the stored record.
    """
    return store.create(employee_in)


@router.get("", response_model=List[Employee])
def list_employees(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    page_size: Optional[str] = Query(None, alias="pageSize", description="Items per page (default 10)"),
    store: EmployeeStore = Depends(get_store),
) -> List[Employee]:
    """Return one page of employees ordered by ``id``.

    Missing, malformed or non-positive ``page``/``pageSize`` values fall
    back to the defaults instead of failing.  A page past the end of
    the list is an empty array.
    """
    return store.list_page(
        parse_page_param(page, DEFAULT_PAGE),
        parse_page_param(page_size, DEFAULT_PAGE_SIZE),
    )


@router.get("/{employee_id}", response_model=Employee)
def get_employee(
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store),
) -> Employee:
    """Retrieve a single employee by ID.

    Returns HTTP 400 for a non-integer ID and 404 if no such employee
    exists.
    """
    employee = store.get(employee_id)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: int = Depends(parse_employee_id),
    _content_type: None = Depends(require_json_content),
    employee_in: EmployeeUpdate = Depends(json_payload(EmployeeUpdate)),
    store: EmployeeStore = Depends(get_store),
) -> Employee:
    """Replace an existing employee.

    All fields are replaced; the identifier always comes from the path.
    Requires ``Content-Type: application/json`` (HTTP 415 otherwise).
    """
    employee = store.update(employee_id, employee_in)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store),
) -> None:
    """Delete an employee; responds with HTTP 204 and no body."""
    if not store.delete(employee_id):
        raise _not_found(employee_id)
    return None
