"""Session cookie helpers shared by the routes."""

from fastapi import HTTPException, Response, status

from board.config import Settings
from board.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> str:
    """Resolve the session cookie to a user ID or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller tried to do, used in the error message

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie.

    Production serves the frontend from another origin, which needs
    ``samesite=none`` and therefore ``secure``.
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
