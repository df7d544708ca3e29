"""Create all tables directly from the models (local development without Alembic)."""
from jobly.db.base import Base
from jobly.db.session import engine
import jobly.db.models  # noqa: F401  registers tables on Base.metadata


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


if __name__ == "__main__":
    init_db()
