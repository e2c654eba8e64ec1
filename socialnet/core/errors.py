# socialnet/core/errors.py

from enum import Enum


class ErrorKind(str, Enum):
    STORE_UNAVAILABLE = "store_unavailable"
    WRITE_CONFLICT = "write_conflict"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    OPERATION_FAILED = "operation_failed"


class AccountError(Exception):
    """
    Base class for every failure the account flows report.
    `message` is safe to show to clients; the underlying cause is only
    chained via `raise ... from` and logged.
    """
    kind: ErrorKind = ErrorKind.OPERATION_FAILED
    status_code: int = 500
    default_message = "Operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StoreUnavailable(AccountError):
    kind = ErrorKind.STORE_UNAVAILABLE
    status_code = 503
    default_message = "Database unavailable"


class WriteConflict(AccountError):
    kind = ErrorKind.WRITE_CONFLICT
    status_code = 409
    default_message = "Email already registered"


class UserNotFound(AccountError):
    kind = ErrorKind.USER_NOT_FOUND
    status_code = 404
    default_message = "User not found"


class WrongPassword(AccountError):
    kind = ErrorKind.WRONG_PASSWORD
    status_code = 400
    default_message = "Wrong password"


class OperationFailed(AccountError):
    pass
