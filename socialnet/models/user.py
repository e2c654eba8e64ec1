# socialnet/models/user.py

import uuid
from pydantic import BaseModel, ConfigDict
from sqlalchemy import Column, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

def _new_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    """
    Database model for registered users.
    Stores the display name, the login email and the bcrypt password hash.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)


# -------------------------------
# Record Schemas
# -------------------------------

class UserRecord(BaseModel):
    """
    A user as held by the credential store, hash included.
    Never serialized to HTTP clients directly; see UserOut.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    username: str
    email: str
    password_hash: str


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
