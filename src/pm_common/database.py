from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config.settings import settings


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models across modules."""

    pass


def _connect_args(url: str) -> dict[str, object]:
    # FastAPI runs sync endpoints in a threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine: Engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=_connect_args(settings.DATABASE_URL),
)

session_factory = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


def get_db_session() -> Generator[Session, None, None]:
    """FastAPI dependency: yields a Session, auto-closes after request."""
    with session_factory() as session:
        yield session
