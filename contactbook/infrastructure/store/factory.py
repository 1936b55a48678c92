"""Contact store factory."""

import logging

from contactbook.infrastructure.store.base import ContactStoreProtocol
from contactbook.infrastructure.store.postgrest_store import PostgrestContactStore
from contactbook.infrastructure.store.sql_store import SqlContactStore
from contactbook.persistence.database import create_engine, create_session_factory, init_models
from contactbook.settings import Settings

logger = logging.getLogger(__name__)


class StoreConfigurationError(ValueError):
    """Settings do not describe a usable contact store."""


async def create_store(config: Settings) -> ContactStoreProtocol:
    """Build the contact store selected by ``config.store_backend``.

    Args:
        config: Application settings

    Returns:
        A ready-to-use store; the caller closes it with ``aclose()``

    Raises:
        StoreConfigurationError: If the backend is unknown or missing credentials
    """
    backend = config.store_backend.lower()

    if backend == "postgrest":
        if not config.supabase_url or not config.supabase_key:
            raise StoreConfigurationError(
                "store_backend is 'postgrest' but SUPABASE_URL or SUPABASE_KEY is not set"
            )
        logger.info(f"Using hosted contact store at {config.supabase_url}")
        return PostgrestContactStore(
            base_url=config.supabase_url,
            api_key=config.supabase_key,
            table=config.contacts_table,
        )

    if backend == "sql":
        engine = create_engine(config.database_url)
        if engine.dialect.name == "sqlite":
            await init_models(engine)
        logger.info(f"Using SQL contact store ({engine.dialect.name})")
        return SqlContactStore(create_session_factory(engine), engine=engine)

    raise StoreConfigurationError(f"Unknown store backend: {config.store_backend}")
