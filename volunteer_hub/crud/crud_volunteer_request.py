# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from typing import List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_hub.db import models
from volunteer_hub.errors import Exhausted, Forbidden, NotFound
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.identifiers import ensure_same_user, parse_identifier

logger = logging.getLogger(__name__)


def get_request(db: Session, request_id: int):
    return db.query(models.VolunteerRequest).filter(models.VolunteerRequest.id == request_id).first()


def list_requests_owned_by(
    db: Session, identity: schemas.Identity, target_id: Union[int, str]
) -> List[models.VolunteerRequest]:
    owner_id = ensure_same_user(identity, target_id)
    return (
        db.query(models.VolunteerRequest)
        .filter(models.VolunteerRequest.owner_id == owner_id)
        .order_by(models.VolunteerRequest.id.asc())
        .all()
    )


def create_request(db: Session, identity: schemas.Identity, request: schemas.VolunteerRequestCreate) -> int:
    """
    Records a volunteer request and takes one slot from the referenced need.

    The slot is taken with a guarded decrement in the same transaction as the
    insert, so the counter never goes below zero and a request is only stored
    when a slot was actually taken.
    """
    need_id = parse_identifier(request.need_id, name="need id")
    try:
        taken = (
            db.query(models.Need)
            .filter(models.Need.id == need_id, models.Need.volunteers_needed > 0)
            .update({models.Need.volunteers_needed: models.Need.volunteers_needed - 1}, synchronize_session=False)
        )
        if not taken:
            db.rollback()
            if db.query(models.Need.id).filter(models.Need.id == need_id).first() is None:
                raise NotFound("Need not found")
            raise Exhausted("This need has no volunteer slots left")

        db_request = models.VolunteerRequest(
            need_id=need_id,
            volunteer_name=request.volunteer_name,
            volunteer_email=request.volunteer_email,
            suggestion=request.suggestion,
            status="requested",
            owner_id=identity.user_id,
        )
        db.add(db_request)
        db.commit()
        db.refresh(db_request)
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("Request %s for need %s created by user %s", db_request.id, need_id, identity.user_id)
    return db_request.id


def delete_request(db: Session, identity: schemas.Identity, request_id: int) -> None:
    try:
        deleted = (
            db.query(models.VolunteerRequest)
            .filter(models.VolunteerRequest.id == request_id, models.VolunteerRequest.owner_id == identity.user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if not deleted:
        if get_request(db, request_id) is not None:
            raise Forbidden("You can only withdraw your own requests")
        raise NotFound("Request not found")
    logger.info("Request %s deleted by user %s", request_id, identity.user_id)
