"""
Database migration runner for Alembic migrations.
"""
import logging
import os
from alembic.config import Config
from alembic import command
from sqlalchemy import create_engine, text

logger = logging.getLogger(__name__)

ADVISORY_LOCK_ID = 411734002


def run_migrations():
    """
    Run Alembic migrations to head revision.
    Uses a PostgreSQL advisory lock so several instances starting together
    don't migrate concurrently.
    """
    from jobly.core import config as app_config

    if not app_config.DATABASE_URL:
        raise ValueError("DATABASE_URL is not set")

    logger.info("RUN_MIGRATIONS=1 -> running alembic upgrade head")

    alembic_ini_path = os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "alembic.ini"
    )
    alembic_cfg = Config(alembic_ini_path)
    alembic_cfg.set_main_option("sqlalchemy.url", app_config.DATABASE_URL)

    engine = create_engine(app_config.DATABASE_URL, pool_pre_ping=True)
    is_postgres = engine.dialect.name == "postgresql"
    lock_conn = None

    try:
        if is_postgres:
            lock_conn = engine.connect()
            lock_conn.execute(text("SELECT pg_advisory_lock(:lock_id)"), {"lock_id": ADVISORY_LOCK_ID})
            lock_conn.commit()
            logger.info("Migration lock acquired")

        command.upgrade(alembic_cfg, "head")
        logger.info("Migrations complete")

    except Exception:
        logger.exception("Migration failed")
        raise
    finally:
        if lock_conn is not None:
            lock_conn.execute(text("SELECT pg_advisory_unlock(:lock_id)"), {"lock_id": ADVISORY_LOCK_ID})
            lock_conn.commit()
            lock_conn.close()
        engine.dispose()
