"""
db/init_db.py
-------------
Creates the lab schemas (users, e-commerce, roles) if they are missing.
Run this module directly to prepare a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Lab 1: plain user records
CREATE TABLE IF NOT EXISTS users (
    id              BIGSERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    email           VARCHAR(255),
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Lab 6: e-commerce catalogue and orders
CREATE TABLE IF NOT EXISTS products (
    id              BIGSERIAL PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    price           NUMERIC(12,2) NOT NULL CHECK (price >= 0),
    picture_url     TEXT
);

CREATE TABLE IF NOT EXISTS orders (
    id              BIGSERIAL PRIMARY KEY,
    date_created    DATE NOT NULL DEFAULT CURRENT_DATE,
    status          VARCHAR(30) NOT NULL DEFAULT 'PAID'
);

CREATE TABLE IF NOT EXISTS order_products (
    order_id        BIGINT NOT NULL REFERENCES orders(id) ON DELETE CASCADE,
    product_id      BIGINT NOT NULL REFERENCES products(id),
    quantity        INT NOT NULL CHECK (quantity > 0),
    PRIMARY KEY (order_id, product_id)
);

-- Lab 7: roles for the login bootstrap
CREATE TABLE IF NOT EXISTS roles (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(20) NOT NULL UNIQUE
                    CHECK (name IN ('ROLE_USER', 'ROLE_MODERATOR', 'ROLE_ADMIN'))
);

CREATE INDEX IF NOT EXISTS idx_order_products_product ON order_products(product_id);
"""


def create_tables() -> None:
    """
    Execute the schema SQL.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema is up to date.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created.")
