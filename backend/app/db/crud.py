"""Thin entity-store helpers over a SQLModel session.

None of the helpers commit. Callers group their writes inside
``write_scope`` so that a multi-step mutation is committed once, or rolled
back as a whole when any step fails.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import update as sa_update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, SQLModel, col, select

from app.core.errors import StoreError
from app.core.logging import get_logger
from app.core.time import utcnow

ModelT = TypeVar("ModelT", bound=SQLModel)

logger = get_logger(__name__)


@contextmanager
def write_scope(session: Session) -> Iterator[Session]:
    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("db.write_failed")
        raise StoreError(f"Database write failed: {exc.__class__.__name__}") from exc
    except Exception:
        session.rollback()
        raise


def _where(model: type[SQLModel], filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []
    for key, value in filters.items():
        column = col(getattr(model, key))
        clauses.append(column.is_(None) if value is None else column == value)
    return clauses


def _touch(obj: SQLModel) -> None:
    if hasattr(obj, "updated_at"):
        obj.updated_at = utcnow()


def get_by_id(session: Session, model: type[ModelT], obj_id: object) -> ModelT | None:
    return session.get(model, obj_id)


def find(
    session: Session,
    model: type[ModelT],
    *,
    order_by: Sequence[Any] = (),
    **filters: Any,
) -> list[ModelT]:
    statement = select(model)
    for clause in _where(model, filters):
        statement = statement.where(clause)
    if order_by:
        statement = statement.order_by(*order_by)
    return list(session.exec(statement).all())


def create(session: Session, model: type[ModelT], **fields: Any) -> ModelT:
    obj = model(**fields)
    session.add(obj)
    session.flush()
    return obj


def save(session: Session, obj: ModelT) -> ModelT:
    _touch(obj)
    session.add(obj)
    session.flush()
    return obj


def update(session: Session, obj: ModelT, **fields: Any) -> ModelT:
    for key, value in fields.items():
        setattr(obj, key, value)
    return save(session, obj)


def bulk_update(
    session: Session,
    model: type[SQLModel],
    filters: Mapping[str, Any],
    values: Mapping[str, Any],
) -> int:
    payload = dict(values)
    if "updated_at" in model.model_fields:
        payload.setdefault("updated_at", utcnow())
    statement = sa_update(model).where(*_where(model, filters)).values(**payload)
    result = session.execute(statement.execution_options(synchronize_session="evaluate"))
    return result.rowcount or 0


def bulk_delete(session: Session, model: type[SQLModel], **filters: Any) -> int:
    statement = sa_delete(model).where(*_where(model, filters))
    result = session.execute(statement.execution_options(synchronize_session="evaluate"))
    return result.rowcount or 0


def delete(session: Session, obj: SQLModel) -> None:
    session.delete(obj)
    session.flush()
