import json
import logging
from pathlib import Path
from typing import Any
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine

from .models import Base, KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Synchronous key-value store backed by a single SQLite file.

    Values are JSON-serialisable documents. Reads and writes each use
    their own short-lived session; a write commits before returning.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    def open(self) -> None:
        """
        Open the store file.

        Creates the file and table if they don't exist.
        """
        if self._engine is not None:
            self.close()

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._engine = create_engine(
            f"sqlite:///{self.db_path}",
            echo=False,
            # Sync endpoints run in a threadpool
            connect_args={"check_same_thread": False},
        )
        self._session_factory = sessionmaker(bind=self._engine)

        # Create tables if they don't exist
        Base.metadata.create_all(self._engine)
        logger.info("Opened key-value store at %s", self.db_path)

    def close(self) -> None:
        """Close the store and release its connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Closed key-value store at %s", self.db_path)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Key-value store is not open")
        return self._session_factory()

    def contains(self, key: str) -> bool:
        """Check whether a key has ever been written."""
        with self._session() as session:
            return session.get(KeyValueEntry, key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded value for a key, or default if missing."""
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                return default
            return json.loads(entry.value)

    def set(self, key: str, value: Any) -> None:
        """Write a value, replacing any existing one."""
        payload = json.dumps(value, separators=(",", ":"))
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=payload))
            else:
                entry.value = payload
            session.commit()
        logger.debug("Wrote key %s (%d bytes)", key, len(payload))

    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        with self._session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is not None:
                session.delete(entry)
                session.commit()

    def keys(self) -> list[str]:
        """List all stored keys."""
        with self._session() as session:
            return list(session.scalars(select(KeyValueEntry.key).order_by(KeyValueEntry.key)))
