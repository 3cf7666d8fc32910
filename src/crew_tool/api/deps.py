"""API dependencies - bearer-token authentication and database session"""
from typing import Annotated, Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session
from sqlalchemy import select

from src.crew_tool.api.errors import ApiError
from src.crew_tool.database import get_db
from src.crew_tool.models.account import Account
from src.crew_tool.models.profile import Profile, ProfileRole
from src.crew_tool.services.access_token import verify_access_token

CREW_IMPORT_ROLES = (ProfileRole.DPA, ProfileRole.SHORE_MANAGEMENT)


def get_current_account(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(default=None, description="Bearer access token")
) -> Account:
    if not authorization:
        raise ApiError("Missing authorization header")
    
    token = authorization.replace("Bearer ", "", 1).strip()
    account_id = verify_access_token(token)
    if account_id is None:
        raise ApiError("Unauthorized")
    
    account = db.execute(
        select(Account).where(Account.id == account_id, Account.is_active == True)
    ).scalar_one_or_none()
    
    if not account:
        raise ApiError("Unauthorized")
    
    return account


def get_caller_profile(
    db: Session = Depends(get_db),
    account: Account = Depends(get_current_account)
) -> Profile:
    profile = db.execute(
        select(Profile).where(Profile.user_id == account.id)
    ).scalar_one_or_none()
    
    if not profile:
        raise ApiError("Insufficient permissions")
    
    return profile


def require_role(*roles: ProfileRole):
    def dependency(profile: Profile = Depends(get_caller_profile)) -> Profile:
        if profile.role not in roles:
            raise ApiError("Insufficient permissions")
        return profile
    return dependency


DbSession = Annotated[Session, Depends(get_db)]
CrewManager = Annotated[Profile, Depends(require_role(*CREW_IMPORT_ROLES))]
