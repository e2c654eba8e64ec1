# socialnet/database.py

import logging
from contextlib import contextmanager
from pathlib import Path
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from socialnet.core.config import DATABASE_URL
from socialnet.core.errors import OperationFailed, StoreUnavailable, WriteConflict
from socialnet.models import Base
from socialnet.models.user import User, UserRecord


logger = logging.getLogger(__name__)


def _is_memory_sqlite(url) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def _engine_options(url) -> dict:
    if url.get_backend_name() != "sqlite":
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if _is_memory_sqlite(url):
        # one shared connection, otherwise every session sees an empty database
        options["poolclass"] = StaticPool
    return options


class CredentialStore:
    """
    Durable storage of user records, looked up by email.

    The store owns the engine and session factory. Nothing touches the
    database until `open()` succeeds; after `close()` every operation fails
    with StoreUnavailable until the store is opened again.
    """

    def __init__(self, url: str = DATABASE_URL):
        self.url = make_url(url)
        self._engine = None
        self._sessions = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def _display_url(self) -> str:
        return self.url.render_as_string(hide_password=True)

    def open(self):
        if self._engine is not None:
            return

        try:
            if self.url.get_backend_name() == "sqlite" and not _is_memory_sqlite(self.url):
                Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(self.url, **_engine_options(self.url))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Failed to connect to database %s: %s", self._display_url(), e)
            raise StoreUnavailable() from e

        try:
            Base.metadata.create_all(bind=engine)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            engine.dispose()
            logger.error("Failed to connect to database %s: %s", self._display_url(), e)
            raise StoreUnavailable() from e

        self._engine = engine
        self._sessions = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=engine
        )
        logger.info("Connected to database %s", self._display_url())

    def close(self):
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.info("Closed database %s", self._display_url())

    def ping(self) -> bool:
        if self._engine is None:
            return False
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return False

    @contextmanager
    def _session(self):
        if self._sessions is None:
            raise StoreUnavailable("Database connection is not open")
        db = self._sessions()
        try:
            yield db
        except (OperationalError, InterfaceError) as e:
            raise StoreUnavailable() from e
        except SQLAlchemyError as e:
            raise OperationFailed() from e
        finally:
            db.close()

    # -------------------------------
    # Record Operations
    # -------------------------------

    def create(self, username: str, email: str, password_hash: str) -> UserRecord:
        """
        Persists a new user under a freshly generated id.
        All three fields are required; a second record with the same email
        is rejected with WriteConflict.
        """
        required = (("username", username), ("email", email), ("password_hash", password_hash))
        for field, value in required:
            if not value:
                raise OperationFailed(f"User validation failed: {field} is required")

        with self._session() as db:
            user = User(username=username, email=email, password_hash=password_hash)
            db.add(user)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise WriteConflict() from e
            db.refresh(user)
            return UserRecord.model_validate(user)

    def find_by_email(self, email: str) -> UserRecord | None:
        with self._session() as db:
            user = db.query(User).filter(User.email == email).first()
            return UserRecord.model_validate(user) if user else None


def get_store(request: Request) -> CredentialStore:
    return request.app.state.store
