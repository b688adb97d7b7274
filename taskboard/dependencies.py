"""
Auth gate for protected routes.

``get_current_user`` runs before every task handler: it pulls the token out
of the ``Authorization`` header, verifies it and pins the identity on
``request.state.user``.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from taskboard.exceptions import AuthenticationInvalid, AuthenticationMissing, InvalidTokenError
from taskboard.models.user import Identity
from taskboard.utils.auth import TokenService, get_token_service


def _extract_token(authorization: str) -> Optional[str]:
    """Return the second whitespace-separated item of the header.

    The scheme word is not checked, so ``Bearer x`` and ``Token x`` both yield ``x``.
    """
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    if not authorization:
        raise AuthenticationMissing()
    try:
        identity = tokens.verify(_extract_token(authorization))
    except InvalidTokenError:
        raise AuthenticationInvalid()
    request.state.user = identity
    return identity
