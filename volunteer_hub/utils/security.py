"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from volunteer_hub.config import settings
from volunteer_hub.errors import Expired, InvalidSignature, Malformed
from volunteer_hub.schemas import schemas


def token_lifetime() -> timedelta:
    return timedelta(minutes=settings.access_token_expire_minutes)


def issue_token(
    identity: schemas.Identity, expires_delta: Optional[timedelta] = None, now: Optional[datetime] = None
) -> str:
    """
    Signs a token carrying the identity, valid for the configured lifetime.
    """
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or token_lifetime())
    to_encode = {
        "sub": str(identity.user_id),
        "email": identity.email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: str) -> schemas.Identity:
    """
    Checks signature and expiration and returns the identity the token carries.

    Raises Malformed, InvalidSignature or Expired.
    """
    try:
        jwt.get_unverified_claims(token)
    except JWTError:
        raise Malformed("Token is not well formed")

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise Expired("Token has expired")
    except JWTError:
        raise InvalidSignature("Token signature is invalid")

    subject = payload.get("sub")
    email = payload.get("email")
    if subject is None or email is None:
        raise Malformed("Token does not carry an identity")
    try:
        user_id = int(subject)
    except ValueError:
        raise Malformed("Token subject is not a user id")
    return schemas.Identity(user_id=user_id, email=email)
