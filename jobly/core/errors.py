"""
Error taxonomy for the Jobly API.

Services and dependencies raise these directly; main.py renders them as
``{"detail": message}`` with the matching HTTP status.
"""
from fastapi import status


class JoblyError(Exception):
    """Base error carrying the HTTP status it should be rendered with."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(message)


class BadRequestError(JoblyError):
    """Malformed, missing or duplicate input."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Missing or invalid credential."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(JoblyError):
    """Valid credential without the role the route requires."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(JoblyError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)
