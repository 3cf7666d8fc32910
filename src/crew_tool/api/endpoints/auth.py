"""Access token endpoint"""
import logging
from fastapi import APIRouter

from src.crew_tool.api.deps import DbSession
from src.crew_tool.api.errors import ApiError
from src.crew_tool.schemas.auth import TokenRequest, TokenResponse
from src.crew_tool.services.access_token import issue_access_token
from src.crew_tool.services.accounts import authenticate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/token", response_model=TokenResponse)
def create_token(request: TokenRequest, db: DbSession):
    """Exchange email and password for a bearer token"""
    account = authenticate(db, request.email, request.password)
    if not account:
        logger.warning(f"Failed login attempt for {request.email}")
        raise ApiError("Invalid login credentials", status_code=401)
    
    return TokenResponse(access_token=issue_access_token(account.id))
