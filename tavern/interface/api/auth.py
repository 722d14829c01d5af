"""Cookie authentication for API routes."""

from tavern.domain.error import NotAuthorizedError
from tavern.domain.service import JWTService
from tavern.util.jwt import JWTError

AUTH_COOKIE = "auth_token"
# Same token, for clients that do not keep cookies
AUTH_HEADER = "X-Auth-Token"


def authenticate(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the user id carried by the auth cookie.

    Raises:
        NotAuthorizedError: If the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise NotAuthorizedError("missingAuthToken")

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError:
        raise NotAuthorizedError("invalidCredentials")

    return payload.user_id
