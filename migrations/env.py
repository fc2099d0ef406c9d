# migrations/env.py

from logging.config import fileConfig
import os

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import engine_from_config, pool

from staking_tracker.core.config import TrackerConfig
from staking_tracker.database.base import Base
from staking_tracker.database.types import EvmAddressType
import staking_tracker.database.tables  # noqa: F401  registers tables on Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_database_url():
    load_dotenv()
    try:
        return TrackerConfig._create_database_config(os.environ).url
    except Exception as e:
        raise RuntimeError(f"Could not determine database URL: {e}")

def render_item(type_, obj, autogen_context):
    """Custom rendering for our types during autogenerate"""
    if type_ == 'type' and isinstance(obj, EvmAddressType):
        autogen_context.imports.add("from staking_tracker.database.types import EvmAddressType")
        return "EvmAddressType()"
    return False

def run_migrations_offline() -> None:
    url = get_database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        compare_server_default=True,
        render_item=render_item,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = get_database_url()

    connectable = engine_from_config(
        {"sqlalchemy.url": url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
            render_item=render_item,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
