"""Database initialization script."""

import logging
from pathlib import Path

from sqlalchemy.engine import Engine

from jobly.config import settings
from jobly.database import Base, engine
from jobly.models import Company, Job  # noqa: F401  (registers tables on Base)

logger = logging.getLogger(__name__)


def init_database(bind: Engine | None = None) -> list[str]:
    """
    Create the companies and jobs tables if they don't exist.

    Safe to run repeatedly. When using the default SQLite file, the data root
    directory is created first.

    Args:
        bind: Engine to create the tables on (default: the application engine)

    Returns:
        Names of the tables in the metadata
    """
    if bind is None:
        bind = engine
        if bind.dialect.name == "sqlite":
            Path(settings.data_root).mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating database tables on {bind.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=bind)
    tables = list(Base.metadata.tables.keys())
    logger.info(f"Tables ready: {', '.join(tables)}")
    return tables


if __name__ == "__main__":
    from jobly.logging_config import setup_logging

    setup_logging(settings.log_level, json_logs=False)
    init_database()
