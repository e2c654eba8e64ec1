# socialnet/api/health.py

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from socialnet.database import CredentialStore, get_store


router = APIRouter(prefix="/api")


@router.get("/health")
def health(store: CredentialStore = Depends(get_store)):
    """
    Reports whether the credential store answers queries.
    Used for uptime monitoring; returns 503 while the database is unreachable.
    """
    if store.ping():
        return {"status": "ok", "database": "connected"}
    return JSONResponse(
        status_code=503,
        content={"status": "error", "database": "disconnected"}
    )
