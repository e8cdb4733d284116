"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
"""

from typing import Optional

from fastapi import status


class VolunteerHubError(Exception):
    """
    Base class for errors that map onto an HTTP response.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class Unauthorized(VolunteerHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class Forbidden(VolunteerHubError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"


class NotFound(VolunteerHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class InvalidArgument(VolunteerHubError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid argument"


class Exhausted(VolunteerHubError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "No volunteer slots left"


class Internal(VolunteerHubError):
    pass


class VerificationError(Exception):
    """
    Raised when an identity token cannot be trusted.
    """


class Malformed(VerificationError):
    pass


class InvalidSignature(VerificationError):
    pass


class Expired(VerificationError):
    pass
