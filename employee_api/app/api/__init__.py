"""
HTTP layer of the employee service.

Versioned routers live in subpackages such as ``v1``; each exposes a
``router`` that ``main.create_app`` includes.  Request parsing helpers
shared by a version's endpoints sit next to them in ``dependencies``.
"""
