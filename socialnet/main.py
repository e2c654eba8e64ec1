# socialnet/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from socialnet import __version__
from socialnet.api import auth, health
from socialnet.core.config import CORS_ORIGINS, LOG_LEVEL
from socialnet.core.errors import StoreUnavailable
from socialnet.database import CredentialStore


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        app.state.store.open()
    except StoreUnavailable:
        logger.warning("Serving without a database connection; health checks will report it")
    try:
        yield
    finally:
        app.state.store.close()


def create_app(store: CredentialStore | None = None) -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(title="socialnet", version=__version__, lifespan=lifespan)
    app.state.store = store or CredentialStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(health.router)
    return app


app = create_app()
