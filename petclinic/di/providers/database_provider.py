from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database connections in the container.
        Nothing is registered for the in-memory backend.
        """
        settings = get_settings()
        if settings.repository_backend != "mongo":
            return

        # Register MongoDB client manager as singleton
        container.register_singleton("mongo_client", get_mongo_client())
