"""Account repository for database operations."""

from typing import Optional, Tuple

from postgrest.exceptions import APIError

from .base import BaseRepository
from ..admin import admin_insert_and_select
from ..database_models.account import AccountDO
from ..database_models.account_settings import AccountSettingsDO, DEFAULT_ACCOUNT_SETTINGS
from ...errors import DatabaseError, QueryResult


class AccountRepository(BaseRepository):
    """Repository for Account lookups and creation."""

    LOGGER_NAME = "accounts"

    def fetch_by_location_id(self, location_id: str) -> QueryResult:
        """
        Fetch the single account for a CRM location ID.

        Zero or several matching rows are reported as an error.

        Args:
            location_id: CRM location ID

        Returns:
            QueryResult holding the account row, or the service error
        """
        try:
            response = (
                self.client.table(AccountDO.TABLE)
                .select("*")
                .eq("ghl_location_id", location_id)
                .single()
                .execute()
            )
        except APIError as e:
            return QueryResult(error=DatabaseError.from_api_error(e))

        return QueryResult(data=response.data)

    def find_by_location_id(self, location_id: str) -> Optional[AccountDO]:
        """
        Find the account for a CRM location ID, if any.

        Args:
            location_id: CRM location ID

        Returns:
            AccountDO instance or None

        Raises:
            DatabaseError: If the query fails or several accounts match
        """
        try:
            response = (
                self.client.table(AccountDO.TABLE)
                .select("*")
                .eq("ghl_location_id", location_id)
                .limit(2)
                .execute()
            )
        except APIError as e:
            self.logger.error(f"Failed to fetch account by location ID {location_id}: {e}")
            raise DatabaseError.from_api_error(e) from e

        rows = response.data or []
        if len(rows) > 1:
            raise DatabaseError.not_single(len(rows))
        if not rows:
            self.logger.debug(f"No account found for location ID {location_id}")
            return None

        account = AccountDO.from_row(rows[0])
        self.logger.debug(f"Account {account.id} found for location ID {location_id}")
        return account

    def create(self, account_name: str, ghl_location_id: Optional[str] = None) -> AccountDO:
        """
        Create a new account.

        Args:
            account_name: Display name of the account
            ghl_location_id: Optional CRM location ID

        Returns:
            Created AccountDO instance

        Raises:
            ValueError: If an account already uses the location ID
            DatabaseError: If the insert fails
        """
        if ghl_location_id and self.find_by_location_id(ghl_location_id):
            raise ValueError(f"Account already exists for location ID: {ghl_location_id}")

        payload = {"account_name": account_name, "ghl_location_id": ghl_location_id}
        result = admin_insert_and_select(AccountDO.TABLE, payload)
        if not result.ok:
            raise result.error

        account = AccountDO.from_row(result.data)
        self.logger.info(f"Created account record: {account.id}")
        return account

    def create_with_settings(
        self,
        account_name: str,
        ghl_location_id: Optional[str] = None
    ) -> Tuple[AccountDO, AccountSettingsDO]:
        """
        Create an account together with its default settings row.

        The account is deleted again if the settings insert fails.

        Args:
            account_name: Display name of the account
            ghl_location_id: Optional CRM location ID

        Returns:
            Tuple of the created account and its stored settings

        Raises:
            ValueError: If an account already uses the location ID
            DatabaseError: If either insert fails
        """
        account = self.create(account_name, ghl_location_id)

        result = admin_insert_and_select(
            AccountSettingsDO.TABLE,
            {"account_id": account.id, **DEFAULT_ACCOUNT_SETTINGS}
        )
        if not result.ok:
            self.logger.error(
                f"Failed to create settings for account {account.id}, cleaning up account"
            )
            self._delete(account.id)
            raise result.error

        settings = AccountSettingsDO.from_row(result.data)
        self.logger.info(f"Created default settings {settings.id} for account {account.id}")
        return account, settings

    def _delete(self, account_id: str) -> None:
        """Delete an account row; failures are logged, not raised."""
        try:
            self.client.table(AccountDO.TABLE).delete().eq("id", account_id).execute()
        except APIError as e:
            self.logger.error(
                f"Failed to clean up account {account_id}: {DatabaseError.from_api_error(e).details}"
            )
