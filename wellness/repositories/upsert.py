"""
Keyed insert-or-overwrite shared by the repositories that own a natural key.
"""
from typing import Any, Dict, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


def upsert_row(db: Session, model: Type, keys: Dict[str, Any], values: Dict[str, Any]):
    """
    Insert a row identified by keys, or overwrite its values if it exists.

    A concurrent insert of the same key surfaces as an IntegrityError on
    commit; the loser re-reads the winner's row and overwrites it, so the
    last write wins.

    Args:
        db: Database session
        model: Mapped class with a unique constraint over keys
        keys: Natural key columns and values
        values: Columns to write

    Returns:
        The persisted row
    """
    row = db.query(model).filter_by(**keys).first()
    if row is None:
        row = model(**keys, **values)
        db.add(row)
    else:
        for column, value in values.items():
            setattr(row, column, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        row = db.query(model).filter_by(**keys).one()
        for column, value in values.items():
            setattr(row, column, value)
        db.commit()

    db.refresh(row)
    return row
