"""
Pydantic schema definitions for API payloads.

Request payloads (``EmployeeCreate``, ``EmployeeUpdate``) are kept
separate from the stored representation (``Employee``) so that clients
can never choose or change a record's identifier.
"""
