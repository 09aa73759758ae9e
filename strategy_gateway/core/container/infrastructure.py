"""Infrastructure dependency factories.

Application-scoped singletons (``lru_cache``):
- get_logger: structured logger
- get_database: SQLAlchemy engine/session manager
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from strategy_gateway.core.config import get_settings
from strategy_gateway.core.enums import Environment

if TYPE_CHECKING:
    from strategy_gateway.domain.protocols.logger_protocol import LoggerProtocol
    from strategy_gateway.infrastructure.persistence.database import Database


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from strategy_gateway.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_database() -> "Database":
    """Get database manager singleton (app-scoped).

    Only created when ``storage_backend`` is ``"database"``.

    Returns:
        Database manager instance.
    """
    from strategy_gateway.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )
