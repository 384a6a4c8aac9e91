# mainstreet_admin/api/v1/endpoints/businesses.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from mainstreet_admin.db.session import get_db
from mainstreet_admin.models.business import Business as BusinessModel
from mainstreet_admin.schemas.business import Business, BusinessCreate, BusinessUpdate
from mainstreet_admin.services import crud
from mainstreet_admin.services.crud import NotFoundError
import logging

router = APIRouter()

@router.get("/", response_model=List[Business])
def get_businesses(db: Session = Depends(get_db)):
    return crud.list_rows(db, BusinessModel, BusinessModel.created_at.desc(), BusinessModel.id.desc())

@router.get("/{business_id}", response_model=Business)
def get_business(business_id: int, db: Session = Depends(get_db)):
    try:
        return crud.get_row(db, BusinessModel, business_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Business not found")

@router.post("/", response_model=Business, status_code=status.HTTP_201_CREATED)
def create_business(business: BusinessCreate, db: Session = Depends(get_db)):
    logging.info(f"Creating business: {business.name}")
    return crud.create_row(db, BusinessModel, business.model_dump())

@router.put("/{business_id}", response_model=Business)
def update_business(business_id: int, business: BusinessUpdate, db: Session = Depends(get_db)):
    try:
        return crud.update_row(db, BusinessModel, business_id, business.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Business not found")

@router.delete("/{business_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_business(business_id: int, db: Session = Depends(get_db)):
    try:
        crud.delete_row(db, BusinessModel, business_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Business not found")
