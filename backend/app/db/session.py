from __future__ import annotations

from collections.abc import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


def _connect_args(database_url: str) -> dict[str, object]:
    # FastAPI serves sync endpoints from a threadpool.
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.database_url, connect_args=_connect_args(settings.database_url))


def init_db(bind: Engine | None = None) -> None:
    """Create all tables registered on ``SQLModel.metadata``."""
    import app.models  # noqa: F401  (registers tables)

    target = bind or engine
    SQLModel.metadata.create_all(target)
    logger.info("db.init url=%s", target.url.render_as_string(hide_password=True))


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
