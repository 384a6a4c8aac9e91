# mainstreet_admin/services/crud.py

from typing import Any, Dict, List, Type
from sqlalchemy.orm import Session
from mainstreet_admin.db.session import Base
import logging

class NotFoundError(Exception):
    """Raised when a row looked up by primary key does not exist."""

    def __init__(self, model: Type[Base], obj_id: Any):
        self.model = model
        self.obj_id = obj_id
        super().__init__(f"{model.__name__} {obj_id} not found")


def list_rows(db: Session, model: Type[Base], *order_by) -> List[Base]:
    query = db.query(model)
    if order_by:
        query = query.order_by(*order_by)
    return query.all()

def get_row(db: Session, model: Type[Base], obj_id: int) -> Base:
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFoundError(model, obj_id)
    return obj

def create_row(db: Session, model: Type[Base], data: Dict[str, Any]) -> Base:
    obj = model(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    logging.info(f"Created {model.__tablename__} row {obj.id}")
    return obj

def update_row(db: Session, model: Type[Base], obj_id: int, data: Dict[str, Any]) -> Base:
    obj = get_row(db, model, obj_id)
    for field, value in data.items():
        setattr(obj, field, value)
    db.commit()
    db.refresh(obj)
    logging.info(f"Updated {model.__tablename__} row {obj_id}: {sorted(data)}")
    return obj

def delete_row(db: Session, model: Type[Base], obj_id: int) -> None:
    obj = get_row(db, model, obj_id)
    db.delete(obj)
    db.commit()
    logging.info(f"Deleted {model.__tablename__} row {obj_id}")
