# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_volunteer_request
from volunteer_hub.db.database import get_db
from volunteer_hub.dependencies import authenticate
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.identifiers import parse_identifier

router = APIRouter(
    prefix="/api",
    tags=["Volunteer Requests"],
    responses={404: {"description": "Not found"}},
)


@router.get("/user_request_volunteer/{user_id}", response_model=List[schemas.VolunteerRequest])
def read_user_requests(
    user_id: str,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Retrieves the volunteer requests made by the authenticated user.
    """
    return crud_volunteer_request.list_requests_owned_by(db, identity, user_id)


@router.post("/request_volunteer", response_model=schemas.Created, status_code=status.HTTP_201_CREATED)
def create_request(
    volunteer_request: schemas.VolunteerRequestCreate,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    """
    Asks to volunteer for a need, taking one of its open slots.
    """
    request_id = crud_volunteer_request.create_request(db, identity, volunteer_request)
    return {"message": "Volunteer request submitted successfully", "id": request_id}


@router.delete("/request_volunteer/{request_id}", response_model=schemas.Message)
def delete_request(
    request_id: str,
    identity: schemas.Identity = Depends(authenticate),
    db: Session = Depends(get_db),
):
    crud_volunteer_request.delete_request(db, identity, parse_identifier(request_id, name="request id"))
    return {"message": "Volunteer request deleted successfully"}
