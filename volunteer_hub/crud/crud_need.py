# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from typing import List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_hub.config import settings
from volunteer_hub.db import models
from volunteer_hub.errors import Forbidden, InvalidArgument, NotFound
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.identifiers import ensure_same_user, parse_non_negative_int

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"thumbnail"}


def get_need(db: Session, need_id: int):
    return db.query(models.Need).filter(models.Need.id == need_id).first()


def list_upcoming(db: Session, limit: int = settings.upcoming_limit) -> List[models.Need]:
    return (
        db.query(models.Need)
        .order_by(models.Need.deadline.asc(), models.Need.id.asc())
        .limit(limit)
        .all()
    )


def list_needs_owned_by(db: Session, identity: schemas.Identity, target_id: Union[int, str]) -> List[models.Need]:
    owner_id = ensure_same_user(identity, target_id)
    return (
        db.query(models.Need)
        .filter(models.Need.owner_id == owner_id)
        .order_by(models.Need.deadline.asc(), models.Need.id.asc())
        .all()
    )


def create_need(db: Session, identity: schemas.Identity, need: schemas.NeedCreate) -> int:
    volunteers_needed = parse_non_negative_int(need.volunteers_needed, "volunteers_needed")
    db_need = models.Need(
        thumbnail=need.thumbnail,
        post_title=need.post_title,
        description=need.description,
        category=need.category,
        location=need.location,
        volunteers_needed=volunteers_needed,
        deadline=need.deadline,
        organizer_name=need.organizer_name,
        organizer_email=need.organizer_email,
        owner_id=identity.user_id,
    )
    try:
        db.add(db_need)
        db.commit()
        db.refresh(db_need)
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("Need %s created by user %s", db_need.id, identity.user_id)
    return db_need.id


def update_need(db: Session, identity: schemas.Identity, need_id: int, need: schemas.NeedUpdate) -> models.Need:
    """
    Merges the provided fields into a need the caller owns.
    """
    update_data = need.model_dump(exclude_unset=True)
    cleared = sorted(key for key, value in update_data.items() if value is None and key not in NULLABLE_FIELDS)
    if cleared:
        raise InvalidArgument(f"{', '.join(cleared)} cannot be null")
    if "volunteers_needed" in update_data:
        update_data["volunteers_needed"] = parse_non_negative_int(
            update_data["volunteers_needed"], "volunteers_needed"
        )

    owned = db.query(models.Need).filter(models.Need.id == need_id, models.Need.owner_id == identity.user_id)
    try:
        if update_data:
            matched = owned.update(update_data, synchronize_session=False)
        else:
            matched = owned.count()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if not matched:
        _raise_not_owned(db, need_id)
    logger.info("Need %s updated by user %s (%s)", need_id, identity.user_id, ", ".join(sorted(update_data)))
    return get_need(db, need_id)


def delete_need(db: Session, identity: schemas.Identity, need_id: int) -> None:
    try:
        deleted = (
            db.query(models.Need)
            .filter(models.Need.id == need_id, models.Need.owner_id == identity.user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    if not deleted:
        _raise_not_owned(db, need_id)
    logger.info("Need %s deleted by user %s", need_id, identity.user_id)


def _raise_not_owned(db: Session, need_id: int):
    if db.query(models.Need.id).filter(models.Need.id == need_id).first() is not None:
        raise Forbidden("You can only modify your own volunteer posts")
    raise NotFound("Need not found")
