"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_user
from volunteer_hub.db import models
from volunteer_hub.db.database import get_db
from volunteer_hub.dependencies import clear_token_cookie, get_current_user, set_token_cookie
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.security import issue_token

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)


@router.post("/jwt", response_model=schemas.TokenIssued)
def issue_identity_token(body: schemas.TokenRequest, response: Response, db: Session = Depends(get_db)):
    """
    Looks the user up by email and hands back a signed token in an HTTP-only cookie.
    """
    user = crud_user.get_user_by_email(db, email=body.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")

    token = issue_token(schemas.Identity(user_id=user.id, email=user.email))
    set_token_cookie(response, token)
    logger.info("Issued token for user %s", user.id)
    return {"message": "User found successfully", "user_id": user.id, "email": user.email}


@router.post("/logout", response_model=schemas.Message)
def logout(response: Response):
    clear_token_cookie(response)
    return {"message": "Logged out successfully"}


@router.post("/api/users", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def register_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    """
    Registers a user profile so the user can request a token.
    """
    if crud_user.get_user_by_email(db, email=user.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    db_user = crud_user.create_user(db, user)
    if db_user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    return db_user


@router.get("/api/user_data", response_model=schemas.User)
def read_user_data(current_user: models.User = Depends(get_current_user)):
    """
    Retrieves the current authenticated user's profile.
    """
    return current_user
