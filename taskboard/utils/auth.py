import hmac
from datetime import datetime, timedelta, UTC

from fastapi import Request
from jose import jwt, JWTError

from taskboard.exceptions import ConfigurationError, InvalidTokenError
from taskboard.models.user import Identity, User


class TokenService:
    """Issue and verify HS256 JWTs carrying ``{id, email, exp}``.

    Stateless: nothing is stored server-side, so tokens stay valid until they
    expire. One shared secret signs every token.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=1)):
        if not secret_key:
            raise ConfigurationError("JWT secret is not configured")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, identity) -> str:
        expire = datetime.now(UTC) + self.expires_delta
        payload = {
            "id": identity.id,
            "email": identity.email,
            "exp": int(expire.timestamp()),  # JWT spec uses Unix timestamp
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token) -> Identity:
        """Return the identity inside ``token`` or raise ``InvalidTokenError``.

        The secret is checked again here, not only in ``__init__``: a service
        whose key was cleared after construction must not verify anything.
        """
        if not self._secret_key:
            raise ConfigurationError("JWT secret is not configured")
        if not token or not isinstance(token, str):
            raise InvalidTokenError("empty token")
        try:
            # jwt.decode validates signature and exp
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e
        if "id" not in payload or "email" not in payload:
            raise InvalidTokenError("token is missing identity claims")
        return Identity(id=payload["id"], email=payload["email"])


def credentials_match(user: User, email, password) -> bool:
    """Compare both fields against the user in one combined check.

    Both comparisons always run so the response does not depend on which
    field was wrong.
    """
    if not isinstance(email, str) or not isinstance(password, str):
        return False
    email_ok = hmac.compare_digest(email.encode("utf-8"), user.email.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), user.password.encode("utf-8"))
    return email_ok and password_ok


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service
