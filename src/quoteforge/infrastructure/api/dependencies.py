"""FastAPI dependencies for identity resolution and database access."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from quoteforge.core.exceptions import UnauthorizedError
from quoteforge.core.logging import get_logger
from quoteforge.infrastructure.auth import JWTError, jwt_service
from quoteforge.infrastructure.persistence.database import get_db_session

logger = get_logger(__name__)


@dataclass
class CurrentUser:
    """The authenticated caller, extracted from a valid access token."""

    user_id: str
    email: str | None = None


async def resolve_user(
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentUser | None:
    """Resolve the request to a user identity.

    Returns None when the Authorization header is missing, malformed or
    carries an invalid or expired token.
    """
    if authorization is None:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Identity resolution failed: invalid Authorization header format")
        return None

    try:
        payload = jwt_service.validate_access_token(parts[1])
    except JWTError as e:
        logger.info("Identity resolution failed", error=str(e))
        return None

    return CurrentUser(user_id=str(payload["user_id"]), email=payload.get("email"))


async def require_user(
    user: Annotated[CurrentUser | None, Depends(resolve_user)],
) -> CurrentUser:
    """Fail the action with UNAUTHORIZED when no identity was resolved."""
    if user is None:
        raise UnauthorizedError()
    return user


AuthenticatedUser = Annotated[CurrentUser, Depends(require_user)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
