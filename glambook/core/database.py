"""
Database configuration and session management
"""

from typing import Generator

from sqlmodel import SQLModel, Session, create_engine
import structlog

from glambook.core.config import get_settings

logger = structlog.get_logger(__name__)
settings = get_settings()

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=connect_args,
)


def init_db(bind=None) -> None:
    """Create tables for every registered model"""
    # Registers the table models on SQLModel.metadata
    import glambook.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables created")


def get_session() -> Generator[Session, None, None]:
    """Dependency to get database session"""
    with Session(engine) as session:
        yield session
