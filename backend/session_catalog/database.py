from pathlib import Path
from typing import Generator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from session_catalog.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create the engine for the configured DATABASE_URL"""
    connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
    engine_kwargs = {}

    if settings.is_sqlite:
        db_path = settings.database_url.replace("sqlite:///", "", 1)
        if db_path in ("", ":memory:") or settings.database_url == "sqlite://":
            # In-memory databases only live as long as their connection
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        settings.database_url,
        echo=settings.sql_echo,
        connect_args=connect_args,
        **engine_kwargs,
    )


def get_session(request: Request) -> Generator[Session, None, None]:
    """Get database session"""
    with Session(request.app.state.engine) as session:
        yield session


def init_db(engine: Engine) -> None:
    """Initialize database - create all tables"""
    # Import models so they register with SQLModel metadata
    from session_catalog.models.session import ConferenceSession  # noqa: F401

    SQLModel.metadata.create_all(engine)
