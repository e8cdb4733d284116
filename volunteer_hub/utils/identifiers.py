"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

from typing import Union

from volunteer_hub.errors import Forbidden, InvalidArgument
from volunteer_hub.schemas import schemas

# largest value an Integer column holds on every supported backend
MAX_STORE_INT = 2**31 - 1


def parse_identifier(raw: Union[int, str], name: str = "id") -> int:
    """
    Converts a client supplied identifier into a store identifier.
    """
    if isinstance(raw, bool):
        raise InvalidArgument(f"Invalid {name}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()) or len(text) > len(str(MAX_STORE_INT)):
            raise InvalidArgument(f"Invalid {name}")
        value = int(text)
    if value <= 0 or value > MAX_STORE_INT:
        raise InvalidArgument(f"Invalid {name}")
    return value


def parse_non_negative_int(raw: Union[int, str], name: str) -> int:
    if isinstance(raw, bool):
        raise InvalidArgument(f"{name} must be a non-negative integer")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise InvalidArgument(f"{name} must be a non-negative integer")
    if value < 0 or value > MAX_STORE_INT:
        raise InvalidArgument(f"{name} must be a non-negative integer")
    return value


def ensure_same_user(identity: schemas.Identity, target_id: Union[int, str]) -> int:
    """
    Rejects a route-level user id that is not the caller's own.
    """
    user_id = parse_identifier(target_id, name="user id")
    if user_id != identity.user_id:
        raise Forbidden("You can only access your own records")
    return user_id
