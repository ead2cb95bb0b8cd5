from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds the service layer may raise."""
    not_found = "not_found"
    access_denied = "access_denied"
    conflict = "conflict"
    not_valid = "not_valid"
    unauthorized = "unauthorized"
    internal = "internal"


class AppError(Exception):
    kind: ErrorKind = ErrorKind.internal

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    kind = ErrorKind.not_found

    def __init__(self, resource: str, resource_id: object):
        super().__init__(f"{resource} with id {resource_id} not found")
        self.resource = resource
        self.resource_id = str(resource_id)


class AccessDeniedError(AppError):
    kind = ErrorKind.access_denied


class ConflictError(AppError):
    kind = ErrorKind.conflict


class NotValidError(AppError):
    kind = ErrorKind.not_valid


class UnauthorizedError(AppError):
    kind = ErrorKind.unauthorized


class InternalError(AppError):
    """Data-integrity failures: never an access decision."""
    kind = ErrorKind.internal
