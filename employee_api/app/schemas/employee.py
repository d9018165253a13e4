"""
Pydantic schemas for employee records.

An employee has a store-assigned integer ``id`` plus a ``name``, a
``position`` and a ``salary``.  Request payloads never carry an
identifier: any ``id`` key a client sends is ignored and the path or
the store decides it.  Fields missing from a payload take their zero
value, so ``{}`` is a valid (if uninteresting) employee.  Payloads are
validated strictly: a salary must be a JSON number and the text fields
JSON strings; ``"100"`` or ``true`` is rejected rather than coerced.
"""

from pydantic import BaseModel, Field


class EmployeeBase(BaseModel):
    """Fields shared by all employee schemas."""

    name: str = Field("", description="Full name of the employee")
    position: str = Field("", description="Job title")
    salary: float = Field(0.0, description="Salary; expected non-negative but not enforced")


class EmployeeCreate(EmployeeBase):
    """Schema for creating a new employee."""

    model_config = {
        "extra": "ignore",
        "strict": True,
    }


class EmployeeUpdate(EmployeeBase):
    """Schema for replacing an existing employee.

    Updates are full replacements, not partial merges: a field omitted
    from the payload is reset to its default.
    """

    model_config = {
        "extra": "ignore",
        "strict": True,
    }


class Employee(BaseModel):
    """Schema for a stored employee as returned by the API.

    Instances are frozen; the store hands them out directly and replaces
    them on update instead of mutating them.
    """

    id: int
    name: str
    position: str
    salary: float

    model_config = {
        "frozen": True,
    }
