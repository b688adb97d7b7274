import os
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: float = 24 * 60
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def get_settings() -> Settings:
    """Read settings from the environment at call-time.

    ``JWT_SECRET`` wins over the older ``SECRET_KEY`` name. There is no default
    secret; an empty value is rejected when the token service is built.
    """
    secret = os.environ.get("JWT_SECRET") or os.environ.get("SECRET_KEY", "")
    return Settings(
        secret_key=secret,
        algorithm=os.environ.get("ALGORITHM", "HS256"),
        access_token_expire_minutes=float(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 24 * 60)),
        cors_origins=_split_origins(os.environ.get("CORS_ORIGINS", "*")) or ("*",),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
