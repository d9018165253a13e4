"""
Service layer.

``employee_service`` owns the employee records and the lock guarding
them; ``pagination`` slices ordered snapshots into pages.  Handlers
talk to the store only through these modules.
"""
