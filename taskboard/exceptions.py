class ConfigurationError(RuntimeError):
    """Raised when a required setting (the signing secret) is missing."""


class InvalidTokenError(Exception):
    """Raised for any token that cannot be trusted: bad signature, garbage, expired."""


class APIError(Exception):
    """Base for errors that map straight to a JSON ``{"message": ...}`` response."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthenticationMissing(APIError):
    status_code = 401
    message = "Access denied. No token."


class AuthenticationInvalid(APIError):
    status_code = 400
    message = "Invalid token"


class CredentialMismatch(APIError):
    status_code = 401
    message = "Invalid credentials"


class NotFound(APIError):
    status_code = 404
    message = "Not found"
