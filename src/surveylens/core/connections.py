"""Thread-safe connection management for SQLAlchemy.

Usage:
    from surveylens.core.connections import ConnectionManager, ConnectionConfig

    config = ConnectionConfig.for_url("sqlite:///./surveylens.db")
    manager = ConnectionManager(config)
    manager.initialize()

    with manager.session_scope() as session:
        # Use session...

    manager.close()
"""

from __future__ import annotations

import threading
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from surveylens.core.logging import get_logger
from surveylens.storage import init_database

logger = get_logger(__name__)

_MEMORY_URL = "sqlite:///:memory:"


@dataclass
class ConnectionConfig:
    """Connection configuration for SQLAlchemy.

    Attributes:
        database_url: SQLAlchemy database URL
        sqlite_timeout: SQLite busy timeout in seconds
        echo_sql: Whether to echo SQL statements (for debugging)
    """

    database_url: str
    sqlite_timeout: float = 30.0
    echo_sql: bool = False

    @classmethod
    def for_url(cls, database_url: str, **kwargs: Any) -> ConnectionConfig:
        """Create config for a database URL."""
        return cls(database_url=database_url, **kwargs)

    @classmethod
    def for_file(cls, db_path: Path, **kwargs: Any) -> ConnectionConfig:
        """Create config for a SQLite database file."""
        return cls(database_url=f"sqlite:///{db_path}", **kwargs)

    @classmethod
    def in_memory(cls, **kwargs: Any) -> ConnectionConfig:
        """Create config for an in-memory database (useful for testing)."""
        return cls(database_url=_MEMORY_URL, **kwargs)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def sqlite_path(self) -> Path | None:
        """Filesystem path of a file-backed SQLite database, if any."""
        if not self.is_sqlite or self.database_url == _MEMORY_URL:
            return None
        return Path(self.database_url.split(":///", 1)[1])


@dataclass
class ConnectionManager:
    """Connection management for SQLAlchemy.

    Provides a sync session factory with serialized commits and
    proper cleanup on close.

    Usage:
        manager = ConnectionManager(config)
        manager.initialize()

        with manager.session_scope() as session:
            # SQLAlchemy operations...

        manager.close()
    """

    config: ConnectionConfig
    _engine: Engine | None = field(default=None, init=False, repr=False)
    _session_factory: sessionmaker[Session] | None = field(default=None, init=False, repr=False)
    _commit_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _init_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _initialized: bool = field(default=False, init=False, repr=False)

    def initialize(self) -> None:
        """Create the engine, schema and session factory.

        Safe to call multiple times (idempotent).

        Raises:
            RuntimeError: If initialization fails
        """
        with self._init_lock:
            if self._initialized:
                return

            try:
                self._init_sqlalchemy()
                self._initialized = True
            except Exception as e:
                self.close()
                raise RuntimeError(f"Failed to initialize connections: {e}") from e

    def _init_sqlalchemy(self) -> None:
        kwargs: dict[str, Any] = {"echo": self.config.echo_sql}
        if self.config.database_url == _MEMORY_URL:
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        elif self.config.is_sqlite:
            sqlite_path = self.config.sqlite_path
            if sqlite_path is not None:
                sqlite_path.parent.mkdir(parents=True, exist_ok=True)
            kwargs["connect_args"] = {"check_same_thread": False}

        self._engine = create_engine(self.config.database_url, **kwargs)

        if self.config.is_sqlite:

            @event.listens_for(self._engine, "connect")
            def configure_sqlite(dbapi_conn: Any, connection_record: Any) -> None:
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute(f"PRAGMA busy_timeout={int(self.config.sqlite_timeout * 1000)}")
                cursor.close()

        init_database(self._engine)

        # autoflush=False prevents mid-query writes; we flush at commit time with a lock
        self._session_factory = sessionmaker(
            self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.debug("database_initialized", url=self.config.database_url)

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError(
                "ConnectionManager not initialized. Call manager.initialize() first."
            )

    @contextmanager
    def session_scope(self) -> Generator[Session]:
        """Get a session with automatic cleanup and serialized commits.

        Yields:
            Session bound to the managed engine

        Raises:
            RuntimeError: If manager not initialized
        """
        self._ensure_initialized()
        assert self._session_factory is not None

        session = self._session_factory()
        try:
            yield session
            with self._commit_lock:
                session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @property
    def engine(self) -> Engine:
        self._ensure_initialized()
        assert self._engine is not None
        return self._engine

    def close(self) -> None:
        """Dispose of the engine. Safe to call multiple times."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

        self._session_factory = None
        self._initialized = False


__all__ = [
    "ConnectionConfig",
    "ConnectionManager",
]
