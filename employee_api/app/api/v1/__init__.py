"""
Version 1 of the API.

Routes are mounted at the application root (``/employees``), matching
the paths existing clients already call.  Breaking changes should go to
a new version subpackage mounted under its own prefix.
"""
