"""Signed bearer tokens identifying an account"""
from typing import Optional

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from src.crew_tool.config import settings


def _get_serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(
        settings.ACCESS_TOKEN_SECRET,
        salt="access-token",
    )


def issue_access_token(account_id: int) -> str:
    s = _get_serializer()
    return s.dumps({"account_id": account_id})


def verify_access_token(token: str, max_age: Optional[int] = None) -> Optional[int]:
    """Return the account id for a valid token, None when it is forged or expired"""
    s = _get_serializer()
    if max_age is None:
        max_age = settings.ACCESS_TOKEN_EXPIRE_SECONDS
    try:
        data = s.loads(token, max_age=max_age)
    except (BadSignature, SignatureExpired):
        return None
    if not isinstance(data, dict):
        return None
    return data.get("account_id")
