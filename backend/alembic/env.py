"""Migration runner for the catalog schema.

The target URL always comes from ridecatalog settings, never from alembic.ini,
so migrations hit the same database the service connects to.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from ridecatalog.config import settings
from ridecatalog.database import Base

# Registers the catalog tables on Base.metadata
from ridecatalog.models.organizer import Organizer  # noqa: F401
from ridecatalog.models.event import Event  # noqa: F401
from ridecatalog.models.video_suggestion import VideoSuggestion  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = settings.DATABASE_URL
# SQLite cannot ALTER constraints in place; batch mode recreates the table.
USE_BATCH = DATABASE_URL.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        render_as_batch=USE_BATCH,
        compare_type=True,
        **kwargs,
    )


def migrate_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def migrate_online() -> None:
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = DATABASE_URL
    engine = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    migrate_offline()
else:
    migrate_online()
