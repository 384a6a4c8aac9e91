# mainstreet_admin/api/v1/endpoints/rewards.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from mainstreet_admin.db.session import get_db
from mainstreet_admin.models.reward import RewardItem
from mainstreet_admin.schemas.reward import Reward, RewardCreate, RewardUpdate
from mainstreet_admin.services import crud
from mainstreet_admin.services.crud import NotFoundError
import logging

router = APIRouter()

@router.get("/", response_model=List[Reward])
def get_rewards(db: Session = Depends(get_db)):
    return crud.list_rows(db, RewardItem, RewardItem.created_at.desc(), RewardItem.id.desc())

@router.get("/{reward_id}", response_model=Reward)
def get_reward(reward_id: int, db: Session = Depends(get_db)):
    try:
        return crud.get_row(db, RewardItem, reward_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Reward not found")

@router.post("/", response_model=Reward, status_code=status.HTTP_201_CREATED)
def create_reward(reward: RewardCreate, db: Session = Depends(get_db)):
    logging.info(f"Creating reward: {reward.name} ({reward.point_threshold} points)")
    return crud.create_row(db, RewardItem, reward.model_dump())

@router.put("/{reward_id}", response_model=Reward)
def update_reward(reward_id: int, reward: RewardUpdate, db: Session = Depends(get_db)):
    try:
        return crud.update_row(db, RewardItem, reward_id, reward.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Reward not found")

@router.delete("/{reward_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reward(reward_id: int, db: Session = Depends(get_db)):
    try:
        crud.delete_row(db, RewardItem, reward_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Reward not found")
