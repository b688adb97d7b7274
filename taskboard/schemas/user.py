from pydantic import BaseModel
from typing import Any


class LoginRequest(BaseModel):
    # Any value is accepted; a missing or non-string field is a credential mismatch (401), not a 422
    email: Any = None
    password: Any = None


class TokenOut(BaseModel):
    token: str


class MessageOut(BaseModel):
    message: str
