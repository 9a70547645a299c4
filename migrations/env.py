"""
Alembic environment configuration.

Migrations run against DATABASE_URL from the application
settings. A caller that already holds a connection (the
migration tests do) can pass it in through
config.attributes["connection"]; it is used as-is and
alembic.ini's logging setup is skipped so the caller's
loggers stay untouched.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import Connection

from bank_accounts.config import get_settings
from bank_accounts.models import Base

config = context.config

shared_connection: Connection | None = config.attributes.get("connection")

if shared_connection is None and config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Autogenerate compares this against the live schema.
target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit the SQL script for DATABASE_URL without connecting."""
    _configure(
        url=get_settings().DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_on_connection(connection: Connection) -> None:
    # SQLite cannot ALTER most things in place; batch mode
    # rebuilds the table instead.
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations to DATABASE_URL, or to the shared connection."""
    if shared_connection is not None:
        run_on_connection(shared_connection)
        return

    engine = create_engine(get_settings().DATABASE_URL, poolclass=pool.NullPool)
    with engine.connect() as connection:
        run_on_connection(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
