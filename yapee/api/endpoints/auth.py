"""
Mock login endpoint. No credentials are checked; see MockAuthClient.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from yapee.error_handler import INTERNAL_ERROR_BODY
from yapee.integrations.clients.mocks.auth import MockAuthClient, mock_auth_client
from yapee.integrations.contracts.auth import LoginRequest, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def get_auth_client() -> MockAuthClient:
    """Dependency for the auth source"""
    return mock_auth_client


@router.post("/login", response_model=User)
async def login(body: LoginRequest, auth: MockAuthClient = Depends(get_auth_client)):
    try:
        return auth.login(body.username, body.password)
    except Exception as e:
        logger.error("API Error - POST /api/auth/login: %s", e, exc_info=True)
        return JSONResponse(status_code=500, content=dict(INTERNAL_ERROR_BODY))
