from logging.config import fileConfig
from alembic import context
from sqlalchemy import create_engine, pool

from liftlog.db import Base, make_engine
from liftlog import models  # noqa: F401  # registers workouts, exercises, exercise_sets
from liftlog.settings import get_settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def get_url() -> str:
    # DATABASE_URL from the environment or .env, same as the app
    return get_settings().DATABASE_URL

def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")

def run_migrations_offline():
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=is_sqlite(url),
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    url = get_url()
    connectable = make_engine(url) if is_sqlite(url) else create_engine(url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=is_sqlite(url),
        )
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
