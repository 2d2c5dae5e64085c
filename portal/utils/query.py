"""Query helpers shared by the repository services: pagination and keyed upsert."""

from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session


def paginate(query: Query, limit: Optional[int] = None, offset: Optional[int] = None) -> Query:
    if limit is not None:
        query = query.limit(limit)
    if offset:
        query = query.offset(offset)
    return query


def _dialect_insert(dialect_name: str):
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
        return insert
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
        return insert
    if dialect_name in ("mysql", "mariadb"):
        from sqlalchemy.dialects.mysql import insert
        return insert
    return None


def upsert_by_key(
    db: Session,
    model,
    key: str,
    insert_values: Dict[str, Any],
    update_values: Dict[str, Any],
):
    """Insert a row for ``key`` or patch ``update_values`` onto the existing one.

    Runs as a single ``INSERT ... ON CONFLICT`` statement where the dialect
    supports it, so two writers racing on a new key cannot both insert.
    ``updated_at`` is always refreshed. Returns the persisted row.
    """
    values = {"key": key, **insert_values}
    patch = {**update_values, "updated_at": func.now()}
    insert = _dialect_insert(db.get_bind().dialect.name)

    if insert is None:
        _upsert_with_retry(db, model, key, values, patch)
    else:
        stmt = insert(model).values(**values)
        if db.get_bind().dialect.name in ("mysql", "mariadb"):
            stmt = stmt.on_duplicate_key_update(**patch)
        else:
            stmt = stmt.on_conflict_do_update(index_elements=[model.key], set_=patch)
        db.execute(stmt)

    db.commit()
    return db.query(model).filter(model.key == key).populate_existing().one()


def _upsert_with_retry(db: Session, model, key: str, values: Dict[str, Any], patch: Dict[str, Any]):
    existing = db.query(model).filter(model.key == key).update(patch, synchronize_session=False)
    if existing:
        return
    try:
        with db.begin_nested():
            db.add(model(**values))
    except IntegrityError:
        # Another writer created the key first; patch theirs instead.
        db.query(model).filter(model.key == key).update(patch, synchronize_session=False)


def patch_fields(data, nullable=()) -> Dict[str, Any]:
    """Fields the caller actually sent; an explicit null only clears ``nullable`` columns."""
    payload = data.model_dump(exclude_unset=True)
    return {
        key: value
        for key, value in payload.items()
        if value is not None or key in nullable
    }
