"""
services/user_service.py
-------------------------
Read Service: lists users and wraps them in a response envelope.
"""

from db.connection import StoreGateway
from models.envelope import ResponseEnvelope
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def list_users(gateway: StoreGateway) -> ResponseEnvelope:
    """
    Fetch all users.

    Returns:
        ``success`` with ``data``/``count``, or ``error`` with the store message.
    """
    result = UserRepository(gateway).list_all()
    if not result.ok:
        return ResponseEnvelope.error(result.error.message)
    users = result.value
    logger.debug(f"Listed {len(users)} users.")
    return ResponseEnvelope.success([user.to_dict() for user in users])
