# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text

from volunteer_hub.db.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    photo_url = Column(String(1024), nullable=True)
    is_active = Column(Integer, default=1)
    created_at = Column(DateTime, default=_utcnow)


class Need(Base):
    __tablename__ = "volunteer_needs"

    id = Column(Integer, primary_key=True, index=True)
    thumbnail = Column(String(1024), nullable=True)
    post_title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    volunteers_needed = Column(Integer, nullable=False)
    deadline = Column(DateTime, nullable=False, index=True)
    organizer_name = Column(String(255), nullable=False)
    organizer_email = Column(String(255), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow)


class VolunteerRequest(Base):
    __tablename__ = "volunteer_requests"

    id = Column(Integer, primary_key=True, index=True)
    # plain reference: removing a need leaves its requests in place
    need_id = Column(Integer, nullable=False, index=True)
    volunteer_name = Column(String(255), nullable=False)
    volunteer_email = Column(String(255), nullable=False)
    suggestion = Column(Text, nullable=True)
    status = Column(Enum("requested", name="volunteer_request_status"), nullable=False, default="requested")
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=_utcnow)
