# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timezone
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


def to_utc(value: datetime) -> datetime:
    """
    Stores deadlines as naive UTC; naive input is taken to be UTC already.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class Identity(BaseModel):
    user_id: int
    email: str


class TokenRequest(BaseModel):
    email: EmailStr


class TokenIssued(BaseModel):
    message: str
    user_id: int
    email: str


class Message(BaseModel):
    message: str


class Created(Message):
    id: int


class UserBase(BaseModel):
    name: str
    email: EmailStr
    photo_url: Optional[str] = None


class UserCreate(UserBase):
    pass


class User(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class NeedBase(BaseModel):
    thumbnail: Optional[str] = None
    post_title: str
    description: str
    category: str
    location: str
    deadline: datetime
    organizer_name: str
    organizer_email: EmailStr

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: datetime) -> datetime:
        return to_utc(value)


class NeedCreate(NeedBase):
    # validated by the store, so "5" and 5 are both accepted
    volunteers_needed: Union[int, str]


class NeedUpdate(BaseModel):
    thumbnail: Optional[str] = None
    post_title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    volunteers_needed: Optional[Union[int, str]] = None
    deadline: Optional[datetime] = None
    organizer_name: Optional[str] = None
    organizer_email: Optional[EmailStr] = None

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value) if value is not None else None


class Need(NeedBase):
    id: int
    volunteers_needed: int
    owner_id: int

    model_config = ConfigDict(from_attributes=True)


class VolunteerRequestCreate(BaseModel):
    need_id: Union[int, str]
    volunteer_name: str
    volunteer_email: EmailStr
    suggestion: Optional[str] = None


class VolunteerRequest(BaseModel):
    id: int
    need_id: int
    volunteer_name: str
    volunteer_email: str
    suggestion: Optional[str] = None
    status: Literal["requested"]
    owner_id: int

    model_config = ConfigDict(from_attributes=True)
