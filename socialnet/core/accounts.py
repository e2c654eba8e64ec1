# socialnet/core/accounts.py

import logging
from socialnet.core.errors import AccountError, OperationFailed, UserNotFound, WrongPassword
from socialnet.core.security import get_password_hash, verify_password
from socialnet.models.user import UserRecord


logger = logging.getLogger(__name__)


def register(store, username: str, email: str, password: str) -> UserRecord:
    """
    Hashes the password and stores a new user record.
    Returns the record exactly as the store persisted it.
    """
    try:
        password_hash = get_password_hash(password)
        return store.create(username=username, email=email, password_hash=password_hash)
    except AccountError:
        raise
    except Exception as e:
        logger.exception("Registration failed for unexpected reason")
        raise OperationFailed("Registration failed") from e


def login(store, email: str, password: str) -> UserRecord:
    """
    Looks the user up by email and checks the password against the stored hash.
    """
    try:
        user = store.find_by_email(email)
        if user is None:
            raise UserNotFound()
        valid = verify_password(password, user.password_hash)
    except AccountError:
        raise
    except Exception as e:
        logger.exception("Login failed for unexpected reason")
        raise OperationFailed("Login failed") from e

    if not valid:
        raise WrongPassword()
    return user
