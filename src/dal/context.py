"""Process-wide data-access objects built once at startup.

The ``DataContext`` owns the pool and the shim handed to route handlers.
It is created explicitly and passed to collaborators rather than stored in
a module global, so tests can build one around a fake driver.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from common.config.env import load_env_file
from common.interfaces import StatementDriver
from dal.config import PoolConfig
from dal.pool import ConnectionPool
from dal.schema import SchemaInitializer, SchemaReport
from dal.shim import CompatibilityShim

logger = logging.getLogger(__name__)


@dataclass
class DataContext:
    """Pool, shim and the report of the schema run that preceded serving."""

    config: PoolConfig
    pool: ConnectionPool
    shim: CompatibilityShim
    report: Optional[SchemaReport] = None


def create_driver(config: PoolConfig) -> StatementDriver:
    """Instantiate the statement driver for ``config.dialect``."""
    if config.dialect == "mysql":
        from dal.mysql import MysqlDriver

        return MysqlDriver(config)
    if config.dialect == "sqlite":
        from dal.sqlite import SqliteDriver

        return SqliteDriver(config)
    raise ValueError(f"Unsupported dialect: {config.dialect}")


def create_data_context(
    config: Optional[PoolConfig] = None,
    driver: Optional[StatementDriver] = None,
) -> DataContext:
    """Build a pool and shim without touching the backing store."""
    config = config or PoolConfig.from_env()
    driver = driver or create_driver(config)
    pool = ConnectionPool(config, driver)
    return DataContext(config=config, pool=pool, shim=CompatibilityShim(pool))


async def startup(
    config: Optional[PoolConfig] = None,
    driver: Optional[StatementDriver] = None,
    initialize_schema: bool = True,
) -> DataContext:
    """Load configuration, check connectivity and bring the schema up to date.

    A failed connection check is logged but does not abort startup; the
    first real statement will surface the error to its caller.
    """
    if config is None:
        load_env_file()
    ctx = create_data_context(config, driver)

    if await ctx.pool.ping():
        logger.info("Connected to %s", ctx.config.describe())
    else:
        logger.warning("Starting without a verified connection to %s", ctx.config.describe())

    if initialize_schema:
        ctx.report = await SchemaInitializer(ctx.pool).initialize()
    return ctx


async def shutdown(ctx: DataContext) -> None:
    """Close the context's pool; safe to call more than once."""
    await ctx.pool.close()
