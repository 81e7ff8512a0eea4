from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from ..database import get_db, get_supabase
from ..models.user import User
from ..services.context import RequestContext
from supabase import Client
import logging

security = HTTPBearer()
logger = logging.getLogger(__name__)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
    supabase: Client = Depends(get_supabase),
) -> User:
    """Get current authenticated user from Supabase token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        auth_response = supabase.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.error(f"Authentication error: {e}")
        raise credentials_exception

    if not auth_response or not auth_response.user:
        raise credentials_exception

    user = User.get_or_create_from_supabase(auth_response.user, db)
    if not user.is_active:
        raise credentials_exception

    return user


async def get_request_context(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
) -> RequestContext:
    """Explicit caller identity handed to every service call"""
    return RequestContext.for_user(db, current_user)
