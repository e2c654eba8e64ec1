# socialnet/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import JSONResponse
from socialnet.core import accounts
from socialnet.core.errors import AccountError
from socialnet.database import CredentialStore, get_store
from socialnet.models.user import UserOut


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


def handle_account_error(e: AccountError):
    """
    Translates a flow failure into the HTTP response the client sees.
    Client errors go through HTTPException; server errors get the
    status/message envelope and are logged with their cause.
    """
    if e.status_code < 500:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    logger.error("%s: %s (cause: %r)", e.kind.value, e.message, e.__cause__)
    return JSONResponse(
        status_code=e.status_code,
        content={"status": "error", "message": e.message}
    )


@router.post("/register", response_model=UserOut)
def register(req: RegisterRequest, store: CredentialStore = Depends(get_store)):
    try:
        user = accounts.register(store, req.username, req.email, req.password)
    except AccountError as e:
        return handle_account_error(e)
    logger.info("Registered user %s", user.id)
    return user


@router.post("/login", response_model=UserOut)
def login(req: LoginRequest, store: CredentialStore = Depends(get_store)):
    try:
        return accounts.login(store, req.email, req.password)
    except AccountError as e:
        return handle_account_error(e)
