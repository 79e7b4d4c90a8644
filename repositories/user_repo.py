"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from db.connection import StoreGateway, StoreResult
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for read and insert operations on the users table."""

    def __init__(self, gateway: StoreGateway):
        self.gateway = gateway

    def list_all(self) -> StoreResult[list[User]]:
        """
        Fetch every user in the store's natural scan order.

        Returns:
            A result holding User objects, or the store error.
        """
        result = self.gateway.query("SELECT * FROM users;")
        if not result.ok:
            return StoreResult(error=result.error)
        return StoreResult.success([User.from_row(row) for row in result.value])

    def create(self, name: str, email: str) -> StoreResult[int]:
        """
        Insert a user; id and created_at are assigned by the store.

        Returns:
            A result holding the affected row count.
        """
        result = self.gateway.execute(
            "INSERT INTO users (name, email) VALUES (%s, %s);", (name, email)
        )
        if result.ok:
            logger.info(f"Inserted user {name} <{email}>.")
        return result
