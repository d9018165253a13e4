"""
Root endpoint.

``GET /`` answers with a short plain-text banner so that load
balancers and curious humans can see the service is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

BANNER = "Employee Management API\n"


@router.get("/", response_class=PlainTextResponse)
def banner() -> str:
    return BANNER
