"""
Alembic env for the community schema. Migrations run with the sync psycopg2 driver.
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

from solace.config import get_settings
from solace.db.base import Base
import solace.db.models  # noqa: F401 - registers every table on Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option(
    "sqlalchemy.url",
    get_settings().database_url.replace("postgresql+asyncpg", "postgresql+psycopg2"),
)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
