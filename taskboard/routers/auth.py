import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from taskboard.database import MemoryStore, get_store
from taskboard.exceptions import CredentialMismatch
from taskboard.schemas.user import LoginRequest, MessageOut, TokenOut
from taskboard.utils.auth import TokenService, credentials_match, get_token_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _read_credentials(payload: Any) -> LoginRequest:
    """Treat an absent or non-object body like ``{}``."""
    if not isinstance(payload, dict):
        return LoginRequest()
    return LoginRequest.model_validate(payload)


@router.post("/login", response_model=TokenOut, responses={401: {"model": MessageOut}})
def login(
    payload: Any = Body(None, examples=[{"email": "admin@example.com", "password": "admin123"}]),
    store: MemoryStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    credentials = _read_credentials(payload)
    user = store.user
    if not credentials_match(user, credentials.email, credentials.password):
        logger.info("Rejected login attempt")
        raise CredentialMismatch()

    token = tokens.issue(user)
    logger.info("Issued token for user %s", user.id)
    return {"token": token}
