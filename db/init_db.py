"""
db/init_db.py
-------------
Schema Initializer: creates the users table if it does not already exist
and seeds it with demo rows when it is empty.
Run this module directly to initialize a fresh database:
    python -m db.init_db

Note: the count-then-insert seed step is not transactional. Two first-time
requests racing each other can both see an empty table and both insert.
"""

from db.connection import StoreGateway, StoreResult
from utils.logger import get_logger

logger = get_logger(__name__)

USERS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id          INT AUTO_INCREMENT PRIMARY KEY,
    name        VARCHAR(100),
    email       VARCHAR(100),
    created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

COUNT_USERS_SQL = "SELECT COUNT(*) AS count FROM users"

SEED_USERS_SQL = """
INSERT INTO users (name, email) VALUES
    ('John Doe', 'john@example.com'),
    ('Jane Smith', 'jane@example.com')
"""


def ensure_schema(gateway: StoreGateway) -> StoreResult[bool]:
    """
    Create the users table (idempotent) and seed it if empty.

    Returns:
        A result whose value tells whether the seed insert ran,
        or the first store error encountered.
    """
    created = gateway.execute(USERS_TABLE_SQL)
    if not created.ok:
        return StoreResult(error=created.error)

    counted = gateway.query(COUNT_USERS_SQL)
    if not counted.ok:
        return StoreResult(error=counted.error)

    if int(counted.value[0]["count"]) != 0:
        return StoreResult.success(False)

    seeded = gateway.execute(SEED_USERS_SQL)
    if not seeded.ok:
        return StoreResult(error=seeded.error)
    logger.info(f"Seeded users table with {seeded.value} demo rows.")
    return StoreResult.success(True)


if __name__ == "__main__":
    from config import AppConfig
    from db.connection import open_gateway
    from utils.logger import configure_logging

    app_config = AppConfig.from_env()
    configure_logging(app_config.log_level)
    with open_gateway(app_config.store) as result:
        outcome = result if not result.ok else ensure_schema(result.value)
    if not outcome.ok:
        raise SystemExit(f"❌ Schema initialization failed: {outcome.error}")
    print("✅ Database schema created successfully.")
