"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

import logging

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from volunteer_hub.config import settings
from volunteer_hub.crud import crud_user
from volunteer_hub.db.database import get_db
from volunteer_hub.db.models import User
from volunteer_hub.errors import Unauthorized, VerificationError
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.security import token_lifetime, verify_token

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
        max_age=int(token_lifetime().total_seconds()),
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(key=TOKEN_COOKIE)


def authenticate(request: Request) -> schemas.Identity:
    """
    FastAPI dependency that resolves the caller's identity from the token cookie.
    """
    token = request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise Unauthorized()
    try:
        identity = verify_token(token)
    except VerificationError as exc:
        logger.info("Rejected token on %s %s: %s", request.method, request.url.path, exc)
        raise Unauthorized()
    request.state.identity = identity
    return identity


def get_current_user(
    identity: schemas.Identity = Depends(authenticate), db: Session = Depends(get_db)
) -> User:
    """
    FastAPI dependency to get the profile behind the authenticated identity.
    """
    user = crud_user.get_user(db, identity.user_id)
    if user is None or not user.is_active:
        raise Unauthorized()
    return user
