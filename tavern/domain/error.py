"""Domain layer errors.

Client-facing failures carry a message key and its parameters instead of
text; the interface layer localizes them and maps ``status_code`` and
``kind`` onto the response.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class HTTPDomainError(DomainError):
    """Domain error reported to the client as ``{code, error, message}``."""

    status_code: int = 500
    kind: str = "InternalServerError"

    def __init__(self, message_key: str, **params: object) -> None:
        self.message_key = message_key
        self.params = params
        super().__init__(message_key)


class BadRequestError(HTTPDomainError):
    """Malformed or invalid input."""

    status_code = 400
    kind = "BadRequest"


class NotAuthorizedError(HTTPDomainError):
    """Action not allowed for this user or in the current state."""

    status_code = 401
    kind = "NotAuthorized"


class NotFoundError(HTTPDomainError):
    """Referenced resource does not exist or is not visible."""

    status_code = 404
    kind = "NotFound"
