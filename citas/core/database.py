from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from fastapi import Request
from typing import Generator
import logging

from .exceptions import StoreUnavailable, SchemaError

logger = logging.getLogger(__name__)

Base = declarative_base()

class Store:
    """Owns the engine of the single-file citas database.

    Built once by the bootstrap and handed to the application; nothing in the
    package keeps a module-level engine.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        self._closed = False

    @classmethod
    def open(cls, database_url: str) -> "Store":
        """Open (creating if absent) the database and ensure the citas table.

        Raises StoreUnavailable when the file cannot be opened or pinged, and
        SchemaError when the table cannot be created. The engine is disposed
        before SchemaError propagates.
        """
        connect_args = {}
        if database_url.startswith("sqlite"):
            # Requests are served from the framework threadpool
            connect_args["check_same_thread"] = False

        try:
            engine = create_engine(database_url, connect_args=connect_args)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"error al abrir la base de datos: {e}") from e

        store = cls(engine)
        try:
            store.create_schema()
        except SQLAlchemyError as e:
            store.close()
            raise SchemaError(f"error al crear la tabla citas: {e}") from e

        logger.info("Database and table 'citas' initialized")
        return store

    def create_schema(self) -> None:
        """Create missing tables; existing ones are left untouched."""
        from ..models import cita  # noqa: F401 - registers the table on Base

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self._sessionmaker()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self.engine.dispose()
        self._closed = True
        logger.info("Database closed")

# Database dependency
def get_db(request: Request) -> Generator[Session, None, None]:
    """Get database session from the store attached to the application."""
    store: Store = request.app.state.store
    db = store.session()
    try:
        yield db
    finally:
        db.close()
