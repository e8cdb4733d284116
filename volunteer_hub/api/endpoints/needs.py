# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_hub.config import settings
from volunteer_hub.crud import crud_need
from volunteer_hub.db.database import get_db
from volunteer_hub.dependencies import authenticate
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.identifiers import parse_identifier

router = APIRouter(
    prefix="/api",
    tags=["Needs"],
    responses={404: {"description": "Not found"}},
)


@router.get("/add_volunteer_post", response_model=List[schemas.Need])
def read_upcoming_needs(db: Session = Depends(get_db)):
    """
    Retrieves the needs with the closest deadlines.
    """
    return crud_need.list_upcoming(db, limit=settings.upcoming_limit)


@router.get("/add_volunteer_post/{need_id}", response_model=schemas.Need)
def read_need(need_id: str, db: Session = Depends(get_db)):
    db_need = crud_need.get_need(db, parse_identifier(need_id, name="need id"))
    if db_need is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Need not found")
    return db_need


@router.get("/user_volunteer_post/{user_id}", response_model=List[schemas.Need])
def read_user_needs(
    user_id: str,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Retrieves the needs posted by the authenticated user.
    """
    return crud_need.list_needs_owned_by(db, identity, user_id)


@router.post("/add_volunteer_post", response_model=schemas.Created, status_code=status.HTTP_201_CREATED)
def create_need(
    need: schemas.NeedCreate,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Creates a new need owned by the authenticated user.
    """
    need_id = crud_need.create_need(db, identity, need)
    return {"message": "Volunteer post added successfully", "id": need_id}


@router.put("/add_volunteer_post/{need_id}", response_model=schemas.Need)
def update_need(
    need_id: str,
    need: schemas.NeedUpdate,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Updates a need. Only its owner can update it.
    """
    return crud_need.update_need(db, identity, parse_identifier(need_id, name="need id"), need)


@router.delete("/add_volunteer_post/{need_id}", response_model=schemas.Message)
def delete_need(
    need_id: str,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Deletes a need. Only its owner can delete it.
    """
    crud_need.delete_need(db, identity, parse_identifier(need_id, name="need id"))
    return {"message": "Volunteer post deleted successfully"}
