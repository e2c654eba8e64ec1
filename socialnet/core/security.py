# socialnet/core/security.py

from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from socialnet.core.config import BCRYPT_ROUNDS


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        # a secret bcrypt cannot hash (e.g. NUL bytes) never matches a stored hash
        return False
