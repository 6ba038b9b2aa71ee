# tutorhub/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from tutorhub.core.config import Settings
from tutorhub.core.exceptions import Forbidden

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"

# Claims describing who the token belongs to; everything else is bookkeeping.
IDENTITY_CLAIMS = ("userId", "studentId", "email", "type")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str | None) -> bool:
    if not password_hash:
        # keep the timing of "no such account" close to a real mismatch
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(
    data: dict[str, Any],
    settings: Settings,
    expires_delta: timedelta | None = None,
    token_use: str = ACCESS_TOKEN,
) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire, "token_use": token_use})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_refresh_token(data: dict[str, Any], settings: Settings) -> str:
    return create_access_token(
        data,
        settings,
        expires_delta=timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
        token_use=REFRESH_TOKEN,
    )


def decode_token(
    token: str,
    settings: Settings,
    expected_use: str = ACCESS_TOKEN,
) -> dict[str, Any]:
    """
    Verify signature and expiry, and check the token is of the expected kind.

    Raises Forbidden for anything that does not verify.
    """
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        raise Forbidden() from exc

    if claims.get("token_use") != expected_use:
        raise Forbidden()
    return claims


def identity_from_claims(claims: dict[str, Any]) -> dict[str, Any]:
    return {key: claims[key] for key in IDENTITY_CLAIMS if key in claims}
