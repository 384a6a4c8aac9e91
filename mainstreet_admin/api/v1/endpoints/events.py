# mainstreet_admin/api/v1/endpoints/events.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from mainstreet_admin.db.session import get_db
from mainstreet_admin.models.event import Event as EventModel
from mainstreet_admin.schemas.event import Event, EventCreate, EventUpdate
from mainstreet_admin.services import crud
from mainstreet_admin.services.crud import NotFoundError
import logging

router = APIRouter()

@router.get("/", response_model=List[Event])
def get_events(db: Session = Depends(get_db)):
    return crud.list_rows(db, EventModel, EventModel.date.desc(), EventModel.id.desc())

@router.get("/{event_id}", response_model=Event)
def get_event(event_id: int, db: Session = Depends(get_db)):
    try:
        return crud.get_row(db, EventModel, event_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")

@router.post("/", response_model=Event, status_code=status.HTTP_201_CREATED)
def create_event(event: EventCreate, db: Session = Depends(get_db)):
    logging.info(f"Creating event: {event.name} on {event.date.isoformat()}")
    return crud.create_row(db, EventModel, event.model_dump())

@router.put("/{event_id}", response_model=Event)
def update_event(event_id: int, event: EventUpdate, db: Session = Depends(get_db)):
    try:
        return crud.update_row(db, EventModel, event_id, event.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")

@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    try:
        crud.delete_row(db, EventModel, event_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
