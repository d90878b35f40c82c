"""Base repository class."""

from supabase import Client

from ...utils.logger import get_logger


class BaseRepository:
    """Base class for all repositories."""

    # Child logger name, "crm_agent.db.<LOGGER_NAME>"
    LOGGER_NAME = "repository"

    def __init__(self, client: Client):
        """
        Initialize repository with a database client.

        Args:
            client: Supabase client instance
        """
        self.client = client
        self.logger = get_logger(f"db.{self.LOGGER_NAME}")
