import os

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlmodel import SQLModel

from alembic import context
from session_catalog.config import DEFAULT_DATABASE_URL
from session_catalog.models import ConferenceSession  # noqa: F401

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    context.configure(url=DATABASE_URL, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(DATABASE_URL)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
